"""Book ORM — an authored or edited book."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from scholarlog.db.base import Base, TimestampMixin
from scholarlog.models.owned import OwnedMixin


class Book(OwnedMixin, TimestampMixin, Base):
    __tablename__ = "books"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    authors: Mapped[str] = mapped_column(String(255), nullable=False)
    publication_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    volume: Mapped[str | None] = mapped_column(String(255), nullable=True)
    pages: Mapped[str] = mapped_column(String(255), nullable=False)
