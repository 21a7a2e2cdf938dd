"""Store Handle — tests for session rollback and error translation.

Tests cover:
    - SQLAlchemy errors escaping a session become DatabaseError
    - an exception inside a session leaves nothing behind
    - health_check reports a reachable store
"""

import pytest
from sqlalchemy import select, text
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError

from scholarlog.core.errors import DatabaseError
from scholarlog.infrastructure.database import to_database_error
from scholarlog.models.user import User


def test_error_table_prefers_most_specific_type():
    integrity = IntegrityError("INSERT", {}, Exception("dup"))
    operational = OperationalError("SELECT", {}, Exception("down"))
    assert to_database_error(integrity).operation == "commit"
    assert to_database_error(operational).operation == "execute"
    assert to_database_error(SQLAlchemyError("x")).operation == "unknown"


async def test_sqlalchemy_error_surfaces_as_database_error(db_manager):
    with pytest.raises(DatabaseError):
        async with db_manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))


async def test_exception_rolls_back_pending_rows(db_manager):
    with pytest.raises(RuntimeError):
        async with db_manager.session() as db:
            db.add(User(
                first_name="Ada", last_name="Lovelace",
                email_address="a@x.com", password="$2b$04$placeholder",
            ))
            await db.flush()
            raise RuntimeError("boom")

    async with db_manager.session() as db:
        result = await db.execute(select(User))
        assert result.scalars().all() == []


async def test_health_check_on_reachable_store(db_manager):
    assert await db_manager.health_check() is True
