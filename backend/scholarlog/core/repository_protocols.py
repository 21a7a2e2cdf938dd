"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Store methods return Outcome values, never raise for the four client error kinds
"""

from typing import Any, Mapping, Protocol

from scholarlog.core.domain_types import Principal, ResourceKind
from scholarlog.core.outcome import Outcome


class UserLike(Protocol):
    """Structural contract for stored users passed to the authenticator."""
    id: int
    email_address: str
    password: str


class CredentialStore(Protocol):
    """Contract for user persistence: implemented by shell."""
    async def find_by_identifier(self, identifier: str) -> UserLike | None: ...
    async def create(self, payload: Mapping[str, Any]) -> Outcome[int]: ...
    async def update_profile(
        self, user_id: int | str, payload: Mapping[str, Any], principal: Principal,
    ) -> Outcome[None]: ...


class ResourceStore(Protocol):
    """Contract for the generic resource engine: implemented by shell."""
    async def list(self, kind: ResourceKind) -> Outcome[list[dict]]: ...
    async def get(self, kind: ResourceKind, resource_id: int | str) -> Outcome[dict]: ...
    async def create(
        self, kind: ResourceKind, payload: Mapping[str, Any], owner_id: int,
    ) -> Outcome[int]: ...
    async def update(
        self, kind: ResourceKind, resource_id: int | str,
        payload: Mapping[str, Any], principal: Principal,
    ) -> Outcome[None]: ...
    async def delete(
        self, kind: ResourceKind, resource_id: int | str, principal: Principal,
    ) -> Outcome[None]: ...
    async def count_owned(self, kind: ResourceKind, owner_id: int) -> int: ...