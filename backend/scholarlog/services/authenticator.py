"""Authenticator — verifies a per-request credential pair against the credential store.

Invariants:
    - Exactly one user is looked up by identifier; nothing is cached between requests
    - Unknown identifier and wrong secret produce the SAME error and message
    - An unknown identifier still pays for one bcrypt comparison (decoy hash)
    - No bcrypt work runs on the event loop, including the first decoy hash
    - The concrete failure reason is logged server-side only
"""

import logging

from scholarlog.core.domain_types import Principal, UserId
from scholarlog.core.errors import UnauthenticatedError
from scholarlog.core.outcome import Err, Ok, Outcome
from scholarlog.core.repository_protocols import CredentialStore
from scholarlog.infrastructure.password_hashing import decoy_hash_async, verify_secret_async

logger = logging.getLogger(__name__)


class Authenticator:
    """Turns (identifier, secret) into a Principal or Unauthenticated."""

    def __init__(self, users: CredentialStore, decoy_rounds: int = 10):
        self._users = users
        self._decoy_rounds = decoy_rounds

    async def authenticate(self, identifier: str, secret: str) -> Outcome[Principal]:
        user = await self._users.find_by_identifier(identifier)
        if user is not None:
            stored = user.password
        else:
            stored = await decoy_hash_async(self._decoy_rounds)
        matched = await verify_secret_async(secret, stored)
        if user is None or not matched:
            reason = "unknown_identifier" if user is None else "secret_mismatch"
            logger.warning("Authentication failed", extra={"reason": reason})
            return Err(UnauthenticatedError())
        return Ok(Principal(id=UserId(user.id), identifier=user.email_address))
