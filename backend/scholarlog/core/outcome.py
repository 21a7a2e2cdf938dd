"""Outcome — explicit tagged result returned by services instead of raising.

Invariants:
    - An Outcome is exactly one of Ok(value) or Err(error)
    - Err only ever carries a ScholarlogError (one of the five error kinds)
    - unwrap() is the single place an Err turns back into a raised exception

Design Decisions:
    - Tagged result over exception-name matching: callers branch on the variant,
      never on a store library's error type strings
    - unwrap() raises so the HTTP shell can rely on the global error handlers
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from scholarlog.core.errors import ScholarlogError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying one of the five error kinds."""
    error: ScholarlogError

    @property
    def is_ok(self) -> bool:
        return False


Outcome = Union[Ok[T], Err]


def unwrap(outcome: "Outcome[T]") -> T:
    """Return the Ok value or raise the carried error."""
    if isinstance(outcome, Err):
        raise outcome.error
    return outcome.value
