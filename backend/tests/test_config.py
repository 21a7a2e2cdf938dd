"""Settings — environment parsing for deployment configuration.

Tests cover:
    - postgresql:// URLs are rewritten to the asyncpg driver
    - CORS origins accept comma-separated and JSON forms
    - bcrypt cost outside [4, 16] is rejected
"""

import pytest
from pydantic import ValidationError

from scholarlog.config import Settings


def test_postgres_url_uses_asyncpg(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@host:5432/db")
    assert Settings().database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_sqlite_url_is_untouched(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///local.db")
    assert Settings().database_url == "sqlite+aiosqlite:///local.db"


@pytest.mark.parametrize("raw", [
    "http://a.edu, http://b.edu",
    '["http://a.edu", "http://b.edu"]',
])
def test_cors_origins_forms(monkeypatch, raw):
    monkeypatch.setenv("CORS_ORIGINS", raw)
    assert Settings().cors_origins == ["http://a.edu", "http://b.edu"]


@pytest.mark.parametrize("rounds", ["3", "17"])
def test_bcrypt_rounds_bounded(monkeypatch, rounds):
    monkeypatch.setenv("BCRYPT_ROUNDS", rounds)
    with pytest.raises(ValidationError):
        Settings()
