"""Course ORM — a course taught by the owner."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from scholarlog.db.base import Base, TimestampMixin
from scholarlog.models.owned import OwnedMixin


class Course(OwnedMixin, TimestampMixin, Base):
    __tablename__ = "courses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    estimated_time: Mapped[str | None] = mapped_column(String(255), nullable=True)
    materials_needed: Mapped[str | None] = mapped_column(Text, nullable=True)
