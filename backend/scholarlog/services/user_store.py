"""User Store — the credential store: signup, lookup and profile updates.

Invariants:
    - emailAddress lookups are exact (case-sensitive)
    - The bcrypt hash is computed once per accepted plaintext, only after field
      validation, the ownership guard and the email uniqueness check all passed
    - Signup reports every violated field plus an email collision in one list
    - Profile update: 404 before 403; only the user themself may update
    - The hash never leaves this module except for verification by the authenticator

Design Decisions:
    - Checks and the write run in two sessions with bcrypt between them: no pooled
      connection is held while hashing. A commit-time IntegrityError still covers an
      email taken in between
"""

import logging
from typing import Any, Mapping

from sqlalchemy import select

from scholarlog.core.domain_types import Principal, parse_record_id
from scholarlog.core.enforce_ownership import check_self
from scholarlog.core.errors import ErrorContext, NotFoundError, ValidationFailedError
from scholarlog.core.field_rules import evaluate_fields
from scholarlog.core.normalize_violations import normalize_violations
from scholarlog.core.outcome import Err, Ok, Outcome
from scholarlog.core.user_rules import USER_FIELDS, select_profile_updates
from scholarlog.infrastructure.database import DatabaseSessionManager
from scholarlog.infrastructure.password_hashing import hash_secret_async
from scholarlog.models.user import User
from scholarlog.schemas.user import project_user
from scholarlog.services.resource_repository import commit_or_conflict, find_taken_values

logger = logging.getLogger(__name__)


class UserStore:
    """Persistence for users and their hashed secrets."""

    def __init__(self, db_manager: DatabaseSessionManager, bcrypt_rounds: int = 10):
        self._db = db_manager
        self.bcrypt_rounds = bcrypt_rounds

    async def find_by_identifier(self, identifier: str) -> User | None:
        async with self._db.session() as db:
            result = await db.execute(
                select(User).where(User.email_address == identifier),
            )
            return result.scalar_one_or_none()

    async def get(self, user_id: int | str) -> User | None:
        record_id = parse_record_id(user_id)
        if record_id is None:
            return None
        async with self._db.session() as db:
            return await db.get(User, record_id)

    async def profile(self, user_id: int) -> Outcome[dict]:
        """Public projection of one user."""
        user = await self.get(user_id)
        if user is None:
            return Err(NotFoundError("User", user_id, ErrorContext(user_id=user_id)))
        return Ok(project_user(user))

    async def create(self, payload: Mapping[str, Any]) -> Outcome[int]:
        """Sign up a new user; returns the new id."""
        report = evaluate_fields(USER_FIELDS, payload)
        values = dict(report.values)
        async with self._db.session() as db:
            taken = await find_taken_values(db, User, USER_FIELDS, values)
        messages = normalize_violations(report.violations, taken)
        if messages:
            return Err(ValidationFailedError(messages))

        values["password"] = await hash_secret_async(values["password"], self.bcrypt_rounds)
        async with self._db.session() as db:
            user = User(**values)
            db.add(user)
            conflict = await commit_or_conflict(db, User, USER_FIELDS, values, "user")
            if conflict:
                return Err(conflict)
        logger.info(f"Created user {user.id}", extra={"user_id": user.id})
        return Ok(user.id)

    async def update_profile(
        self, user_id: int | str, payload: Mapping[str, Any], principal: Principal,
    ) -> Outcome[None]:
        """Apply the truthy supplied profile fields of the caller's own account."""
        context = ErrorContext(user_id=principal.id)
        record_id = parse_record_id(user_id)
        if record_id is None:
            return Err(NotFoundError("User", user_id, context))
        report = evaluate_fields(USER_FIELDS, select_profile_updates(payload), partial=True)
        values = dict(report.values)
        async with self._db.session() as db:
            if await db.get(User, record_id) is None:
                return Err(NotFoundError("User", record_id, context))
            denied = check_self(principal, record_id, "update this user")
            if denied:
                return Err(denied)
            taken = await find_taken_values(
                db, User, USER_FIELDS, values, exclude_id=record_id,
            )
        messages = normalize_violations(report.violations, taken)
        if messages:
            return Err(ValidationFailedError(messages, context))

        if "password" in values:
            values["password"] = await hash_secret_async(values["password"], self.bcrypt_rounds)
        async with self._db.session() as db:
            user = await db.get(User, record_id)
            if user is None:
                return Err(NotFoundError("User", record_id, context))
            for attr, value in values.items():
                setattr(user, attr, value)
            conflict = await commit_or_conflict(
                db, User, USER_FIELDS, values, "user", exclude_id=record_id,
            )
            if conflict:
                return Err(conflict)
        logger.info(f"Updated user {record_id}", extra={"user_id": record_id})
        return Ok(None)
