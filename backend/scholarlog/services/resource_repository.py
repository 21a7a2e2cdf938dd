"""Resource Repository — one generic CRUD engine for all six resource kinds.

Invariants:
    - Every operation opens its own session: requests share no mutable state
    - Reads are public: list/get never consult the ownership guard
    - update/delete order: load (404) -> guard (403) -> validate (400) -> commit
    - A failed write persists nothing: changes are applied only after every check passed
    - Uniqueness is pre-checked; a racing IntegrityError is still reported as ValidationFailed
    - Client-facing failures come back as Err(...); only unexpected failures raise
    - Ids no row can carry (non-numeric, negative, beyond the INTEGER range) are
      404 without touching the store

Design Decisions:
    - Parameterised by ResourceDescriptor + ORM model instead of six route-specific copies
    - find_taken_values shared with the user store: one uniqueness implementation
"""

import logging
from typing import Any, Mapping

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from scholarlog.core.domain_types import Principal, ResourceKind, parse_record_id
from scholarlog.core.enforce_ownership import check_owner
from scholarlog.core.errors import (
    DatabaseError, ErrorContext, NotFoundError, ValidationFailedError,
)
from scholarlog.core.field_rules import FieldRule, evaluate_fields, unique_rules
from scholarlog.core.normalize_violations import normalize_violations
from scholarlog.core.outcome import Err, Ok, Outcome
from scholarlog.core.resource_kinds import ResourceDescriptor, descriptor_for
from scholarlog.infrastructure.database import DatabaseSessionManager
from scholarlog.models import MODELS
from scholarlog.schemas.resource import project_resource

logger = logging.getLogger(__name__)


async def find_taken_values(
    db: AsyncSession, model, rules: tuple[FieldRule, ...],
    values: Mapping[str, Any], exclude_id: int | None = None,
) -> list[str]:
    """Return the unique-violation message of every unique field already in use."""
    taken = []
    for rule in unique_rules(rules):
        value = values.get(rule.attr)
        if value is None:
            continue
        query = select(model.id).where(getattr(model, rule.attr) == value)
        if exclude_id is not None:
            query = query.where(model.id != exclude_id)
        result = await db.execute(query.limit(1))
        if result.first() is not None:
            taken.append(rule.unique_message)
    return taken


async def commit_or_conflict(
    db: AsyncSession, model, rules: tuple[FieldRule, ...],
    values: Mapping[str, Any], label: str, exclude_id: int | None = None,
) -> ValidationFailedError | None:
    """Commit; map a concurrent unique collision to ValidationFailed."""
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        taken = await find_taken_values(db, model, rules, values, exclude_id=exclude_id)
        if not taken:
            logger.error(f"DB integrity error on {label}: {e}")
            raise DatabaseError("Integrity constraint violated", "commit")
        logger.warning(f"Unique collision on {label} commit", extra={"kind": label})
        return ValidationFailedError(
            normalize_violations(taken),
            ErrorContext(resource_kind=label, resource_id=exclude_id),
        )
    return None


class ResourceRepository:
    """Generic list/get/create/update/delete over any ResourceKind."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db = db_manager

    async def list(self, kind: ResourceKind) -> Outcome[list[dict]]:
        """All records of a kind, owner embedded, in id order."""
        descriptor, model = descriptor_for(kind), MODELS[kind]
        async with self._db.session() as db:
            result = await db.execute(select(model).order_by(model.id))
            rows = result.scalars().all()
        return Ok([project_resource(descriptor, row) for row in rows])

    async def get(self, kind: ResourceKind, resource_id: int | str) -> Outcome[dict]:
        descriptor, model = descriptor_for(kind), MODELS[kind]
        record_id = parse_record_id(resource_id)
        if record_id is None:
            return Err(self._not_found(descriptor, resource_id))
        async with self._db.session() as db:
            row = await db.get(model, record_id)
        if row is None:
            return Err(self._not_found(descriptor, resource_id))
        return Ok(project_resource(descriptor, row))

    async def create(
        self, kind: ResourceKind, payload: Mapping[str, Any], owner_id: int,
    ) -> Outcome[int]:
        """Validate the full payload and persist it owned by owner_id."""
        descriptor, model = descriptor_for(kind), MODELS[kind]
        context = ErrorContext(resource_kind=kind.value, user_id=owner_id)
        report = evaluate_fields(descriptor.fields, payload)
        async with self._db.session() as db:
            taken = await find_taken_values(db, model, descriptor.fields, report.values)
            messages = normalize_violations(report.violations, taken)
            if messages:
                return Err(ValidationFailedError(messages, context))

            row = model(**report.values)
            setattr(row, descriptor.owner_attr, owner_id)
            db.add(row)
            conflict = await commit_or_conflict(
                db, model, descriptor.fields, report.values, kind.value,
            )
            if conflict:
                return Err(conflict)
        logger.info(
            f"Created {kind.value} {row.id}",
            extra={"kind": kind.value, "resource_id": row.id, "user_id": owner_id},
        )
        return Ok(row.id)

    async def update(
        self, kind: ResourceKind, resource_id: int | str,
        payload: Mapping[str, Any], principal: Principal,
    ) -> Outcome[None]:
        """Owner-only partial update; all supplied fields apply or none do."""
        descriptor, model = descriptor_for(kind), MODELS[kind]
        record_id = parse_record_id(resource_id)
        if record_id is None:
            return Err(self._not_found(descriptor, resource_id))
        resource_id = record_id
        context = ErrorContext(
            resource_kind=kind.value, resource_id=resource_id, user_id=principal.id,
        )
        async with self._db.session() as db:
            row = await db.get(model, resource_id)
            if row is None:
                return Err(self._not_found(descriptor, resource_id))
            denied = check_owner(
                principal, getattr(row, descriptor.owner_attr), kind, "update",
            )
            if denied:
                return Err(denied)

            report = evaluate_fields(descriptor.fields, payload, partial=True)
            taken = await find_taken_values(
                db, model, descriptor.fields, report.values, exclude_id=resource_id,
            )
            messages = normalize_violations(report.violations, taken)
            if messages:
                return Err(ValidationFailedError(messages, context))

            for attr, value in report.values.items():
                setattr(row, attr, value)
            conflict = await commit_or_conflict(
                db, model, descriptor.fields, report.values, kind.value,
                exclude_id=resource_id,
            )
            if conflict:
                return Err(conflict)
        logger.info(
            f"Updated {kind.value} {resource_id}",
            extra={"kind": kind.value, "resource_id": resource_id, "user_id": principal.id},
        )
        return Ok(None)

    async def delete(
        self, kind: ResourceKind, resource_id: int | str, principal: Principal,
    ) -> Outcome[None]:
        """Owner-only permanent delete."""
        descriptor, model = descriptor_for(kind), MODELS[kind]
        record_id = parse_record_id(resource_id)
        if record_id is None:
            return Err(self._not_found(descriptor, resource_id))
        resource_id = record_id
        async with self._db.session() as db:
            row = await db.get(model, resource_id)
            if row is None:
                return Err(self._not_found(descriptor, resource_id))
            denied = check_owner(
                principal, getattr(row, descriptor.owner_attr), kind, "delete",
            )
            if denied:
                return Err(denied)
            await db.delete(row)
            await db.commit()
        logger.info(
            f"Deleted {kind.value} {resource_id}",
            extra={"kind": kind.value, "resource_id": resource_id, "user_id": principal.id},
        )
        return Ok(None)

    async def count_owned(self, kind: ResourceKind, owner_id: int) -> int:
        """Number of records of a kind owned by one user."""
        model = MODELS[kind]
        owner_column = getattr(model, descriptor_for(kind).owner_attr)
        async with self._db.session() as db:
            result = await db.execute(
                select(func.count()).select_from(model).where(owner_column == owner_id),
            )
            return result.scalar_one()

    # --- helpers ---------------------------------------------------------------

    @staticmethod
    def _not_found(descriptor: ResourceDescriptor, resource_id: int | str) -> NotFoundError:
        return NotFoundError(
            descriptor.label, resource_id,
            ErrorContext(resource_kind=descriptor.kind.value, resource_id=resource_id),
        )

