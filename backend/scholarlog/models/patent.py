"""Patent ORM — a granted or filed patent.

Invariants:
    - patent_number and application_number are unique across all patents
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from scholarlog.db.base import Base, TimestampMixin
from scholarlog.models.owned import OwnedMixin


class Patent(OwnedMixin, TimestampMixin, Base):
    __tablename__ = "patents"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    inventors: Mapped[str] = mapped_column(String(255), nullable=False)
    publication_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    patent_office: Mapped[str] = mapped_column(String(255), nullable=False)
    patent_number: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    application_number: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True,
    )
