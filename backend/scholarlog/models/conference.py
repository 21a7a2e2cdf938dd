"""Conference ORM — a conference paper publication (date-only)."""

from datetime import date

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from scholarlog.db.base import Base, TimestampMixin
from scholarlog.models.owned import OwnedMixin


class Conference(OwnedMixin, TimestampMixin, Base):
    __tablename__ = "conferences"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    authors: Mapped[str] = mapped_column(String(255), nullable=False)
    publication_date: Mapped[date] = mapped_column(Date, nullable=False)
    conference: Mapped[str] = mapped_column(String(255), nullable=False)
    volume: Mapped[str | None] = mapped_column(String(255), nullable=True)
    issue: Mapped[str | None] = mapped_column(String(255), nullable=True)
    pages: Mapped[str | None] = mapped_column(String(255), nullable=True)
