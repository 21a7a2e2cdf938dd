"""User Rules — tests for signup and profile-update validation.

Tests cover:
    - password length boundaries (7 and 21 rejected, 8 and 20 accepted)
    - signup reports every violated field in one list
    - text fields are limited to their column width
    - profile updates keep only truthy updatable fields
"""

import pytest

from scholarlog.core.field_rules import evaluate_fields
from scholarlog.core.user_rules import (
    PASSWORD_LENGTH_MESSAGE, USER_FIELDS, check_password_length, select_profile_updates,
)


def _signup(**overrides) -> dict:
    payload = {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "emailAddress": "a@x.com",
        "password": "password1",
    }
    payload.update(overrides)
    return payload


# ─── password length ─────────────────────────────────────────────

@pytest.mark.parametrize("length", [7, 21])
def test_password_outside_bounds_is_rejected(length):
    assert check_password_length("p" * length) == PASSWORD_LENGTH_MESSAGE
    report = evaluate_fields(USER_FIELDS, _signup(password="p" * length))
    assert report.violations == [PASSWORD_LENGTH_MESSAGE]


@pytest.mark.parametrize("length", [8, 20])
def test_password_at_bounds_is_accepted(length):
    assert check_password_length("p" * length) is None
    assert evaluate_fields(USER_FIELDS, _signup(password="p" * length)).ok


def test_empty_password_reports_both_messages():
    report = evaluate_fields(USER_FIELDS, _signup(password=""))
    assert report.violations == ["Please provide a password.", PASSWORD_LENGTH_MESSAGE]


# ─── signup ──────────────────────────────────────────────────────

def test_empty_signup_reports_every_required_field():
    report = evaluate_fields(USER_FIELDS, {})
    assert report.violations == [
        "A first name is required",
        "A last name is required.",
        "An email address is required",
        "A password is required",
    ]


def test_invalid_email_and_homepage_are_reported():
    report = evaluate_fields(
        USER_FIELDS, _signup(emailAddress="not-an-email", homepage="nope"),
    )
    assert report.violations == [
        "Please enter a valid email address.",
        "Please enter a valid URL.",
    ]


def test_affiliation_length_is_limited():
    report = evaluate_fields(USER_FIELDS, _signup(affiliation="x" * 101))
    assert report.violations == ["Affiliation must be 100 characters or less."]


@pytest.mark.parametrize("name, value, message", [
    ("designation", "d" * 256, "Designation must be 255 characters or less."),
    ("firstName", "f" * 256, "First name must be 255 characters or less."),
    ("emailAddress", "e" * 250 + "@x.com", "Email address must be 255 characters or less."),
    ("homepage", "https://x.com/" + "p" * 250, "Homepage must be 255 characters or less."),
])
def test_text_fields_are_limited_to_column_width(name, value, message):
    report = evaluate_fields(USER_FIELDS, _signup(**{name: value}))
    assert report.violations == [message]


# ─── profile updates ─────────────────────────────────────────────

def test_select_profile_updates_drops_falsy_and_unknown_fields():
    selected = select_profile_updates(
        {"firstName": "Grace", "lastName": "", "homepage": None, "id": 7, "userId": 3},
    )
    assert selected == {"firstName": "Grace"}


def test_select_profile_updates_passes_non_mappings_through():
    assert select_profile_updates(["x"]) == ["x"]
