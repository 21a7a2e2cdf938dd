"""Request Dependencies — service injection, authentication gate and payload access.

Invariants:
    - Services come from app.state (built once in the lifespan), never from module globals
    - Missing, malformed and wrong credentials all end in the same UnauthenticatedError
    - Payloads reach services untouched; shape checking belongs to core/field_rules
    - Write bodies are read after the credentials gate: no body problem can turn a
      401 into a 400
"""

import json
import logging
from typing import Any

from fastapi import Depends, Request

from scholarlog.core.basic_credentials import decode_basic_authorization
from scholarlog.core.domain_types import Principal
from scholarlog.core.errors import InternalError, UnauthenticatedError
from scholarlog.core.field_rules import MALFORMED_BODY
from scholarlog.core.outcome import unwrap
from scholarlog.services.container import AppServices

logger = logging.getLogger(__name__)


def get_services(request: Request) -> AppServices:
    services = getattr(request.app.state, "services", None)
    if services is None:
        raise InternalError("Services not initialized")
    return services


async def get_principal(
    request: Request, services: AppServices = Depends(get_services),
) -> Principal:
    """Authenticate the request's Basic credentials, every time."""
    credentials = decode_basic_authorization(request.headers.get("Authorization"))
    if credentials is None:
        logger.warning(
            "Authentication failed",
            extra={"reason": "missing_or_malformed_header", "path": request.url.path},
        )
        raise UnauthenticatedError()
    identifier, secret = credentials
    return unwrap(await services.authenticator.authenticate(identifier, secret))


async def read_payload(request: Request) -> Any:
    """Request body as decoded JSON; an absent body counts as an empty mapping.

    Undecodable bytes come back as MALFORMED_BODY so that the failure is reported
    by the validation stage, after authentication and the ownership guard.
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except ValueError:
        logger.info("Undecodable request body", extra={"path": request.url.path})
        return MALFORMED_BODY


async def get_payload(
    request: Request, principal: Principal = Depends(get_principal),
) -> Any:
    """Payload of an authenticated write; the body is read only once credentials passed."""
    return await read_payload(request)
