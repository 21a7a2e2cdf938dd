"""Resource Routes — the uniform five-endpoint surface, built once per resource kind.

Invariants:
    - GET collection/detail are public (no credentials read)
    - POST/PUT/DELETE authenticate first, then delegate to the repository
    - POST answers 201 with a Location reference; PUT/DELETE answer 204 with no body
    - /api/users/{id}/{kind}-count is restricted to the user themself
    - Ids are taken as raw path text: one that names no possible row is 404, never 400

Design Decisions:
    - One factory instead of six route files: every kind behaves identically
    - Routers still registered one by one in main.py
"""

from typing import Any

from fastapi import APIRouter, Depends, Response

from scholarlog.api.deps import get_payload, get_principal, get_services
from scholarlog.core.domain_types import Operation, Principal, ResourceKind, parse_record_id
from scholarlog.core.enforce_ownership import check_self
from scholarlog.core.errors import ErrorContext, NotFoundError
from scholarlog.core.outcome import unwrap
from scholarlog.services.container import AppServices


def build_router(kind: ResourceKind) -> APIRouter:
    """Routes for one kind under /api/{kind}s."""
    router = APIRouter(tags=[kind.plural])
    collection = f"/api/{kind.plural}"
    item = collection + "/{resource_id}"

    @router.get(collection)
    async def list_resources(services: AppServices = Depends(get_services)):
        """All records of this kind, any owner."""
        return unwrap(await services.resources.list(kind))

    @router.get(item)
    async def get_resource(
        resource_id: str, services: AppServices = Depends(get_services),
    ):
        return unwrap(await services.resources.get(kind, resource_id))

    @router.post(collection, status_code=Operation.CREATE.success_status)
    async def create_resource(
        principal: Principal = Depends(get_principal),
        payload: Any = Depends(get_payload),
        services: AppServices = Depends(get_services),
    ):
        """Create a record owned by the caller."""
        new_id = unwrap(await services.resources.create(kind, payload, principal.id))
        return Response(
            status_code=Operation.CREATE.success_status,
            headers={"Location": f"{collection}/{new_id}"},
        )

    @router.put(item, status_code=Operation.UPDATE.success_status)
    async def update_resource(
        resource_id: str,
        principal: Principal = Depends(get_principal),
        payload: Any = Depends(get_payload),
        services: AppServices = Depends(get_services),
    ):
        """Owner-only update of the supplied fields."""
        unwrap(await services.resources.update(kind, resource_id, payload, principal))
        return Response(status_code=Operation.UPDATE.success_status)

    @router.delete(item, status_code=Operation.DELETE.success_status)
    async def delete_resource(
        resource_id: str,
        principal: Principal = Depends(get_principal),
        services: AppServices = Depends(get_services),
    ):
        unwrap(await services.resources.delete(kind, resource_id, principal))
        return Response(status_code=Operation.DELETE.success_status)

    @router.get(f"/api/users/{{user_id}}/{kind.value}-count")
    async def count_resources(
        user_id: str,
        principal: Principal = Depends(get_principal),
        services: AppServices = Depends(get_services),
    ):
        """How many records of this kind the caller owns."""
        owner_id = parse_record_id(user_id)
        if owner_id is None or await services.users.get(owner_id) is None:
            raise NotFoundError("User", user_id, ErrorContext(user_id=principal.id))
        denied = check_self(principal, owner_id, f"view this user's {kind.value} count")
        if denied:
            raise denied
        count = await services.resources.count_owned(kind, owner_id)
        return {f"{kind.value}Count": count}

    return router
