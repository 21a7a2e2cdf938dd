"""Basic Credentials — decode an Authorization header into a credential pair.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Absent, non-Basic, undecodable, or separator-less headers all yield None
    - Only the first ':' separates identifier from secret (secrets may contain ':')
"""

import base64
import binascii


def decode_basic_authorization(header: str | None) -> tuple[str, str] | None:
    """Return (identifier, secret) from a Basic header, or None when malformed."""
    if not header:
        return None
    scheme, _, param = header.strip().partition(" ")
    if scheme.lower() != "basic" or not param.strip():
        return None
    try:
        decoded = base64.b64decode(param.strip(), validate=True).decode("utf-8")
    except (binascii.Error, ValueError):
        return None
    identifier, separator, secret = decoded.partition(":")
    if not separator or not identifier:
        return None
    return identifier, secret


def encode_basic_authorization(identifier: str, secret: str) -> str:
    """Build the header value a client would send."""
    token = base64.b64encode(f"{identifier}:{secret}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"
