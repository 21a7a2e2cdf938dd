"""Password Hashing — bcrypt hashing and constant-time verification.

Invariants:
    - A hash is only ever computed from a plaintext within [8, 20] characters
    - A stored hash is never re-hashed
    - Verification uses bcrypt.checkpw (constant-time comparison)
    - Async wrappers run bcrypt in a worker thread: never blocks the event loop

Design Decisions:
    - bcrypt truncates at 72 bytes; inputs are truncated explicitly so multi-byte
      secrets behave the same on every bcrypt release
    - A decoy hash lets unknown identifiers cost the same as wrong secrets
"""

import asyncio
from functools import lru_cache

import bcrypt

from scholarlog.core.user_rules import check_password_length

_BCRYPT_MAX_BYTES = 72


def _secret_bytes(secret: str) -> bytes:
    return secret.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_secret(secret: str, rounds: int = 10) -> str:
    """Hash a plaintext secret. Raises ValueError outside the allowed length."""
    violation = check_password_length(secret)
    if violation:
        raise ValueError(violation)
    hashed = bcrypt.hashpw(_secret_bytes(secret), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_secret(secret: str, hashed: str) -> bool:
    """Compare a plaintext against a stored hash."""
    try:
        return bcrypt.checkpw(_secret_bytes(secret), hashed.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False


@lru_cache(maxsize=4)
def decoy_hash(rounds: int = 10) -> str:
    """Hash compared against when the identifier does not exist."""
    return bcrypt.hashpw(b"scholarlog-decoy", bcrypt.gensalt(rounds=rounds)).decode("utf-8")


async def hash_secret_async(secret: str, rounds: int = 10) -> str:
    return await asyncio.to_thread(hash_secret, secret, rounds)


async def verify_secret_async(secret: str, hashed: str) -> bool:
    return await asyncio.to_thread(verify_secret, secret, hashed)


async def decoy_hash_async(rounds: int = 10) -> str:
    """decoy_hash computed in a worker thread; later calls hit the cache."""
    return await asyncio.to_thread(decoy_hash, rounds)
