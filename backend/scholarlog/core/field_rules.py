"""Field Rules — declarative per-field schema evaluated by one generic engine.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - evaluate_fields reports EVERY violated field, in schema order
    - A missing required field yields only its missing_message (format checks skipped)
    - A present field runs every check; each failing check adds its own message
    - partial=True (updates) evaluates only the fields present in the payload
    - Keys not declared in the schema are dropped, never persisted
    - An undecodable or non-object body is one violation, reported at the validation
      stage like any other

Design Decisions:
    - Checks are (predicate, message) pairs: the message table lives next to the rule
    - FieldReport.values holds only fields that passed; callers persist nothing unless ok
"""

import re
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Callable, Mapping
from urllib.parse import urlparse

from scholarlog.core.domain_types import FieldType

BODY_NOT_OBJECT_MESSAGE = "The request body must be a JSON object."
MALFORMED_BODY_MESSAGE = "The request body is not valid JSON."


class MalformedBody:
    """Stands in for a request body that could not be decoded as JSON."""

    def __repr__(self) -> str:
        return "MalformedBody()"


MALFORMED_BODY = MalformedBody()


@dataclass(frozen=True)
class Check:
    """A single format constraint on a present value."""
    test: Callable[[Any], bool]
    message: str


@dataclass(frozen=True)
class FieldRule:
    """Declaration of one client-facing field."""
    name: str
    attr: str
    required: bool = False
    missing_message: str | None = None
    checks: tuple[Check, ...] = ()
    field_type: FieldType = FieldType.TEXT
    unique_message: str | None = None

    @property
    def is_unique(self) -> bool:
        return self.unique_message is not None


@dataclass
class FieldReport:
    """Result of evaluating a payload: coerced values keyed by ORM attribute."""
    values: dict[str, Any] = field(default_factory=dict)
    violations: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations


# --- Predicates ---------------------------------------------------------------

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def is_not_empty(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def is_date(value: Any) -> bool:
    return parse_date(value) is not None


def is_datetime(value: Any) -> bool:
    return parse_datetime(value) is not None


def is_email(value: Any) -> bool:
    return isinstance(value, str) and bool(_EMAIL_RE.match(value))


def is_url(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    candidate = value if "://" in value else f"http://{value}"
    parsed = urlparse(candidate)
    return parsed.scheme in ("http", "https", "ftp") and "." in parsed.netloc


def max_length(limit: int) -> Callable[[Any], bool]:
    def _check(value: Any) -> bool:
        return isinstance(value, str) and len(value) <= limit
    return _check


def length_between(low: int, high: int) -> Callable[[Any], bool]:
    def _check(value: Any) -> bool:
        return isinstance(value, str) and low <= len(value) <= high
    return _check


# --- Coercion -----------------------------------------------------------------

def parse_date(value: Any) -> date | None:
    """Parse a date-only value; accepts ISO dates and ISO datetimes."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        return None


def parse_datetime(value: Any) -> datetime | None:
    """Parse an ISO datetime; a bare date means midnight."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    # naive UTC: publication columns are stored without a zone
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _as_text(value: Any) -> Any:
    # JSON numbers are accepted for text columns (e.g. estimatedTime: 12)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def _coerce(rule: FieldRule, value: Any) -> Any:
    if value is None:
        return None
    if rule.field_type is FieldType.DATE:
        return parse_date(value)
    if rule.field_type is FieldType.DATETIME:
        return parse_datetime(value)
    return _as_text(value)


# --- Engine -------------------------------------------------------------------

def check_field(rule: FieldRule, value: Any) -> list[str]:
    """Return the violation messages for one field value (empty when valid)."""
    if value is None:
        if rule.required:
            return [rule.missing_message or f"{rule.name} is required."]
        return []
    value = _as_text(value) if rule.field_type is FieldType.TEXT else value
    if rule.field_type is FieldType.TEXT and not isinstance(value, str):
        return [f"{rule.name} must be text."]
    return [check.message for check in rule.checks if not check.test(value)]


def evaluate_fields(
    rules: tuple[FieldRule, ...], payload: Mapping[str, Any], partial: bool = False,
) -> FieldReport:
    """Validate a payload against rules, collecting every violation."""
    report = FieldReport()
    if isinstance(payload, MalformedBody):
        report.violations.append(MALFORMED_BODY_MESSAGE)
        return report
    if not isinstance(payload, Mapping):
        report.violations.append(BODY_NOT_OBJECT_MESSAGE)
        return report
    for rule in rules:
        if partial and rule.name not in payload:
            continue
        value = payload.get(rule.name)
        messages = check_field(rule, value)
        if messages:
            report.violations.extend(messages)
        else:
            report.values[rule.attr] = _coerce(rule, value)
    return report


def unique_rules(rules: tuple[FieldRule, ...]) -> tuple[FieldRule, ...]:
    return tuple(rule for rule in rules if rule.is_unique)
