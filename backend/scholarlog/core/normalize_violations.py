"""Violation Normalizer — one client-facing message list for every validation failure.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Field-constraint messages come first, uniqueness messages after, in declaration order
    - Duplicates are dropped; order of first appearance is kept
    - The result never reveals which origin a message came from
"""

from typing import Any, Iterable, Sequence


def normalize_violations(
    field_messages: Iterable[str], unique_messages: Iterable[str] = (),
) -> list[str]:
    """Merge field and uniqueness violations into one ordered message list."""
    merged: list[str] = []
    for message in (*field_messages, *unique_messages):
        if message and message not in merged:
            merged.append(message)
    return merged


def messages_from_request_errors(errors: Sequence[dict[str, Any]]) -> list[str]:
    """Flatten framework request-validation errors into readable messages."""
    messages = []
    for error in errors:
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        where = ".".join(location)
        text = error.get("msg", "Invalid value")
        messages.append(f"{where}: {text}" if where else text)
    return normalize_violations(messages)
