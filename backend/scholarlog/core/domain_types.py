"""Domain Types — identities, resource kinds and the request pipeline stages.

Invariants:
    - UserId wraps an int: integer primary keys across all tables
    - ResourceKind enumerates exactly the six tracked record types
    - RequestStage order is fixed: a request only moves forward, exiting early on failure
    - Principal is immutable once authentication produced it

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)


@dataclass(frozen=True)
class Principal:
    """Identity established for the current request after authentication."""
    id: UserId
    identifier: str


# ─── Enums ───────────────────────────────────────────────────────

class ResourceKind(str, Enum):
    """The six record types sharing one CRUD/ownership contract."""
    COURSE = "course"
    EVENT = "event"
    JOURNAL = "journal"
    CONFERENCE = "conference"
    BOOK = "book"
    PATENT = "patent"

    @property
    def plural(self) -> str:
        return f"{self.value}s"


class RequestStage(str, Enum):
    """Gates a write request passes through, in order."""
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"
    AUTHORIZED = "authorized"
    VALIDATED = "validated"
    COMMITTED = "committed"


class Operation(str, Enum):
    """Operations exposed per resource kind."""
    LIST = "list"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"

    @property
    def success_status(self) -> int:
        if self is Operation.CREATE:
            return 201
        if self in (Operation.UPDATE, Operation.DELETE):
            return 204
        return 200


class FieldType(str, Enum):
    """Storage type of a declared field: drives value coercion."""
    TEXT = "text"
    DATE = "date"
    DATETIME = "datetime"


# ─── Limits ──────────────────────────────────────────────────────

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 20

# Primary keys are 32-bit INTEGER columns on every supported store
MAX_RECORD_ID = 2**31 - 1
TEXT_COLUMN_LENGTH = 255


def parse_record_id(raw) -> int | None:
    """Return the record id a path segment names, or None when no row can match.

    Non-numeric, signed and out-of-range ids all yield None: they are lookups
    that find nothing, not malformed requests.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        if not raw.isascii() or not raw.isdigit() or len(raw) > len(str(MAX_RECORD_ID)):
            return None
        raw = int(raw)
    if not isinstance(raw, int) or not 1 <= raw <= MAX_RECORD_ID:
        return None
    return raw
