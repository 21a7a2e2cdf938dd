"""Ownership Enforcement — tests for the pure authorization guard.

Tests cover:
    - check_owner returns None for the owner, ForbiddenError otherwise
    - the message names the action and the resource kind
    - check_self restricts user-scoped endpoints to the user themself
"""

from scholarlog.core.domain_types import Principal, RequestStage, ResourceKind, UserId
from scholarlog.core.enforce_ownership import check_owner, check_self
from scholarlog.core.errors import ForbiddenError

OWNER = Principal(id=UserId(1), identifier="a@x.com")
OTHER = Principal(id=UserId(2), identifier="b@x.com")


def test_owner_passes():
    assert check_owner(OWNER, 1, ResourceKind.BOOK, "update") is None


def test_non_owner_is_forbidden():
    error = check_owner(OTHER, 1, ResourceKind.BOOK, "update")
    assert isinstance(error, ForbiddenError)
    assert error.http_status == 403
    assert error.stage is RequestStage.AUTHORIZED
    assert error.message == "You are not authorized to update this book."


def test_delete_message_names_action():
    error = check_owner(OTHER, 1, ResourceKind.PATENT, "delete")
    assert error.message == "You are not authorized to delete this patent."


def test_check_self_allows_own_id():
    assert check_self(OWNER, 1, "update this user") is None


def test_check_self_rejects_other_id():
    error = check_self(OTHER, 1, "update this user")
    assert isinstance(error, ForbiddenError)
    assert error.message == "You are not authorized to update this user"
