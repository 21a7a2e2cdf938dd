"""SQLAlchemy Declarative Base — shared base class and timestamp columns.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
    - created_at/updated_at are maintained by the ORM, never by client payloads

Design Decisions:
    - Separate file for Base: avoids circular imports between models
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all Scholarlog ORM models."""
    pass


class TimestampMixin:
    """Creation/modification timestamps: not client-visible."""
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow,
    )
