"""Ownership Enforcement — the authorization guard for mutating operations.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return ForbiddenError on violation, None on success
    - Only update/delete consult the guard; list/detail reads are public
    - The message names the resource kind and the attempted action

Design Decisions:
    - Return errors (not raise): repository wraps them in Err, keeping the
      error path identical to the success path
"""

from scholarlog.core.domain_types import Principal, ResourceKind
from scholarlog.core.errors import ErrorContext, ForbiddenError


def check_owner(
    principal: Principal, owner_id: int, kind: ResourceKind, action: str,
) -> ForbiddenError | None:
    """Only the owner may update or delete a record."""
    if owner_id != principal.id:
        return ForbiddenError(
            f"You are not authorized to {action} this {kind.value}.",
            ErrorContext(resource_kind=kind.value, user_id=principal.id),
        )
    return None


def check_self(
    principal: Principal, user_id: int, subject: str,
) -> ForbiddenError | None:
    """User-scoped endpoints are restricted to the user themself."""
    if user_id != principal.id:
        return ForbiddenError(
            f"You are not authorized to {subject}",
            ErrorContext(user_id=principal.id),
        )
    return None
