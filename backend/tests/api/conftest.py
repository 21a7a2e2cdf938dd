"""API test fixtures — FastAPI app wired to the test store + httpx client.

Invariants:
    - The app under test gets its services injected on app.state, as the lifespan does
    - Credentials are sent on every protected request (the server keeps no session)

Design Decisions:
    - ASGITransport drives the app in-process; lifespan is not run, so the
      test database from the root conftest is the only store in play
"""

import pytest
from httpx import ASGITransport, AsyncClient

from scholarlog.core.basic_credentials import encode_basic_authorization
from scholarlog.main import create_app


@pytest.fixture
def app(services):
    app = create_app()
    app.state.services = services
    return app


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def auth():
    """Builder for an Authorization header."""
    def _auth(email: str = "a@x.com", password: str = "password1") -> dict:
        return {"Authorization": encode_basic_authorization(email, password)}
    return _auth


@pytest.fixture
def signup(client, user_payload):
    """Sign up through the API; returns the new user's id."""
    async def _signup(email: str = "a@x.com", password: str = "password1") -> int:
        res = await client.post("/api/users", json=user_payload(email, password))
        assert res.status_code == 201, res.text
        found = await client.get(
            "/api/users",
            headers={"Authorization": encode_basic_authorization(email, password)},
        )
        return found.json()["id"]
    return _signup
