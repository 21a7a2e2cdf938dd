"""Owned Mixin — owner foreign key and eager owner relationship for resources.

Invariants:
    - user_id is set once at creation and never reassigned
    - owner is loaded eagerly (selectin) so projections embed it without lazy IO

Design Decisions:
    - declared_attr: each resource table gets its own FK column and relationship
"""

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, declared_attr, mapped_column, relationship


class OwnedMixin:
    """Adds the owner foreign key shared by all six resource kinds."""

    @declared_attr
    def user_id(cls) -> Mapped[int]:
        return mapped_column(
            Integer, ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False, index=True,
        )

    @declared_attr
    def owner(cls) -> Mapped["User"]:  # noqa: F821
        return relationship("User", lazy="selectin")
