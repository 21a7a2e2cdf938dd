"""Root conftest — shared test configuration and store fixtures.

Invariants:
    - Every test gets a fresh SQLite database file (no state between tests)
    - bcrypt runs at the minimum cost factor so hashing stays fast
    - Services are built around the test engine exactly as the lifespan builds them

Design Decisions:
    - File-backed SQLite rather than :memory:, so each session gets its own connection
      and concurrent-request tests behave like a real pool
"""

import os

# Set before any scholarlog import: main.py builds the app at import time
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest
from sqlalchemy.ext.asyncio import create_async_engine

from scholarlog.core.domain_types import Principal, ResourceKind, UserId
from scholarlog.db.base import Base
from scholarlog.infrastructure.database import DatabaseSessionManager
from scholarlog.services.container import build_services

TEST_BCRYPT_ROUNDS = 4


@pytest.fixture
async def test_engine(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'scholarlog.db'}", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_manager(test_engine):
    return DatabaseSessionManager.from_engine(test_engine)


@pytest.fixture
async def services(db_manager):
    return build_services(db_manager, bcrypt_rounds=TEST_BCRYPT_ROUNDS)


def _user_payload(
    email: str = "a@x.com", password: str = "password1", **overrides,
) -> dict:
    payload = {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "emailAddress": email,
        "password": password,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def user_payload():
    """Builder for a valid signup body."""
    return _user_payload


@pytest.fixture
def make_user(services):
    """Sign up a user through the store and return its Principal."""
    async def _make(email: str = "a@x.com", password: str = "password1") -> Principal:
        outcome = await services.users.create(_user_payload(email, password))
        assert outcome.is_ok, outcome
        return Principal(id=UserId(outcome.value), identifier=email)
    return _make


_VALID_RESOURCES = {
    ResourceKind.COURSE: {
        "title": "Compilers",
        "description": "Parsing, IR and code generation.",
        "estimatedTime": "12 weeks",
    },
    ResourceKind.EVENT: {
        "title": "Faculty Development Programme",
        "description": "Week-long workshop on research methods.",
        "eventType": "Workshop",
        "participationType": "Attendee",
        "eventDate": "2024-05-01",
        "location": "Pune",
    },
    ResourceKind.JOURNAL: {
        "title": "On Lattices",
        "authors": "A. Lovelace",
        "publicationDate": "2023-11-02T00:00:00",
        "journal": "Journal of Algebra",
        "volume": "12",
        "publisher": "Elsevier",
    },
    ResourceKind.CONFERENCE: {
        "title": "Graph Sketches",
        "authors": "A. Lovelace, C. Babbage",
        "publicationDate": "2022-07-15",
        "conference": "ICALP",
    },
    ResourceKind.BOOK: {
        "title": "Analytical Engines",
        "authors": "A. Lovelace",
        "publicationDate": "2020-01-10",
        "pages": "320",
    },
    ResourceKind.PATENT: {
        "title": "Difference Engine Gear",
        "inventors": "C. Babbage",
        "publicationDate": "2021-03-09",
        "patentOffice": "IPO",
        "patentNumber": "IN-1001",
        "applicationNumber": "APP-2001",
    },
}


@pytest.fixture
def resource_payload():
    """Builder for a valid create body of any kind."""
    def _build(kind: ResourceKind, **overrides) -> dict:
        return {**_VALID_RESOURCES[kind], **overrides}
    return _build
