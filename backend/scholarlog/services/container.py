"""Service Container — the store handle and services built once per process.

Invariants:
    - Exactly one DatabaseSessionManager backs every service in a container
    - The container is attached to app.state and injected into handlers via Depends

Design Decisions:
    - Explicit construction over module-level singletons: tests build their own
      container around an in-memory engine
"""

from dataclasses import dataclass

from scholarlog.core.repository_protocols import ResourceStore
from scholarlog.infrastructure.database import DatabaseSessionManager
from scholarlog.services.authenticator import Authenticator
from scholarlog.services.resource_repository import ResourceRepository
from scholarlog.services.user_store import UserStore


@dataclass
class AppServices:
    db: DatabaseSessionManager
    users: UserStore
    resources: ResourceStore
    authenticator: Authenticator


def build_services(
    db_manager: DatabaseSessionManager, bcrypt_rounds: int = 10,
) -> AppServices:
    users = UserStore(db_manager, bcrypt_rounds=bcrypt_rounds)
    return AppServices(
        db=db_manager,
        users=users,
        resources=ResourceRepository(db_manager),
        authenticator=Authenticator(users, decoy_rounds=bcrypt_rounds),
    )
