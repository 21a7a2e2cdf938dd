"""User Rules — signup and profile-update schema for the credential store.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Plaintext password length must be within [8, 20] inclusive
    - emailAddress is the unique, case-sensitive login identifier
    - Profile updates only consider truthy supplied values
"""

from typing import Any, Mapping

from scholarlog.core.domain_types import (
    PASSWORD_MAX_LENGTH, PASSWORD_MIN_LENGTH, TEXT_COLUMN_LENGTH,
)
from scholarlog.core.field_rules import (
    Check, FieldRule, is_email, is_not_empty, is_url, length_between, max_length,
)

PASSWORD_LENGTH_MESSAGE = (
    f"Your password should be between {PASSWORD_MIN_LENGTH} "
    f"and {PASSWORD_MAX_LENGTH} characters"
)
EMAIL_TAKEN_MESSAGE = "The email address you entered already exists."


def _fits_column(label: str) -> Check:
    return Check(
        max_length(TEXT_COLUMN_LENGTH),
        f"{label} must be {TEXT_COLUMN_LENGTH} characters or less.",
    )


PASSWORD_RULE = FieldRule(
    name="password", attr="password", required=True,
    missing_message="A password is required",
    checks=(
        Check(is_not_empty, "Please provide a password."),
        Check(length_between(PASSWORD_MIN_LENGTH, PASSWORD_MAX_LENGTH), PASSWORD_LENGTH_MESSAGE),
    ),
)

USER_FIELDS: tuple[FieldRule, ...] = (
    FieldRule(
        name="designation", attr="designation",
        checks=(_fits_column("Designation"),),
    ),
    FieldRule(
        name="firstName", attr="first_name", required=True,
        missing_message="A first name is required",
        checks=(
            Check(is_not_empty, "Please provide a first name."),
            _fits_column("First name"),
        ),
    ),
    FieldRule(
        name="lastName", attr="last_name", required=True,
        missing_message="A last name is required.",
        checks=(
            Check(is_not_empty, "Please provide a last name."),
            _fits_column("Last name"),
        ),
    ),
    FieldRule(
        name="emailAddress", attr="email_address", required=True,
        missing_message="An email address is required",
        checks=(
            Check(is_not_empty, "Please provide an email address."),
            Check(is_email, "Please enter a valid email address."),
            _fits_column("Email address"),
        ),
        unique_message=EMAIL_TAKEN_MESSAGE,
    ),
    PASSWORD_RULE,
    FieldRule(
        name="affiliation", attr="affiliation",
        checks=(Check(max_length(100), "Affiliation must be 100 characters or less."),),
    ),
    FieldRule(
        name="areasOfInterest", attr="areas_of_interest",
        checks=(_fits_column("Areas of interest"),),
    ),
    FieldRule(
        name="homepage", attr="homepage",
        checks=(Check(is_url, "Please enter a valid URL."), _fits_column("Homepage")),
    ),
)

UPDATABLE_PROFILE_FIELDS = (
    "designation", "firstName", "lastName", "affiliation",
    "areasOfInterest", "homepage", "emailAddress", "password",
)


def check_password_length(secret: str) -> str | None:
    """Return the violation message when the plaintext is outside [8, 20]."""
    if PASSWORD_MIN_LENGTH <= len(secret) <= PASSWORD_MAX_LENGTH:
        return None
    return PASSWORD_LENGTH_MESSAGE


def select_profile_updates(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Keep only updatable fields carrying a truthy value."""
    if not isinstance(payload, Mapping):
        return payload
    return {
        name: payload[name]
        for name in UPDATABLE_PROFILE_FIELDS
        if payload.get(name)
    }
