"""Journal ORM — a journal article publication."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from scholarlog.db.base import Base, TimestampMixin
from scholarlog.models.owned import OwnedMixin


class Journal(OwnedMixin, TimestampMixin, Base):
    __tablename__ = "journals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    authors: Mapped[str] = mapped_column(String(255), nullable=False)
    publication_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    journal: Mapped[str] = mapped_column(String(255), nullable=False)
    volume: Mapped[str | None] = mapped_column(String(255), nullable=True)
    issue: Mapped[str | None] = mapped_column(String(255), nullable=True)
    pages: Mapped[str | None] = mapped_column(String(255), nullable=True)
    publisher: Mapped[str] = mapped_column(String(255), nullable=False)
