"""User Routes — sign-in lookup, signup and profile update.

Invariants:
    - GET /api/users returns the authenticated caller's own profile (used for sign-in)
    - POST /api/users is public; 201 with Location "/" on success
    - PUT /api/users/{id} is self-only: 404 before 403 before 400
    - No response ever contains the password hash
"""

from typing import Any

from fastapi import APIRouter, Depends, Response, status

from scholarlog.api.deps import get_payload, get_principal, get_services, read_payload
from scholarlog.core.domain_types import Principal
from scholarlog.core.outcome import unwrap
from scholarlog.services.container import AppServices

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("")
async def get_current_user(
    principal: Principal = Depends(get_principal),
    services: AppServices = Depends(get_services),
):
    """Profile of the authenticated caller."""
    return unwrap(await services.users.profile(principal.id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: Any = Depends(read_payload),
    services: AppServices = Depends(get_services),
):
    """Sign up. The password is hashed once, here, and never returned."""
    unwrap(await services.users.create(payload))
    return Response(status_code=status.HTTP_201_CREATED, headers={"Location": "/"})


@router.put("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_user(
    user_id: str,
    principal: Principal = Depends(get_principal),
    payload: Any = Depends(get_payload),
    services: AppServices = Depends(get_services),
):
    unwrap(await services.users.update_profile(user_id, payload, principal))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
