import os

# Must be set before anything imports app.core.config, which reads the environment at import
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.core.config import settings
from app.db.database import Database
from app.main import create_app


# Register the asyncio marker
def pytest_configure(config):
    config.addinivalue_line(
        "markers", "asyncio: mark test as an asyncio coroutine"
    )


@pytest_asyncio.fixture(scope="function")
async def database(tmp_path):
    """A fresh file-backed SQLite database for each test."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await db.init_models()
    yield db
    await db.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(database):
    """Session for arranging and inspecting rows directly."""
    async with database.session() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(database):
    """HTTP client bound to an app built around the test database"""
    app = create_app(settings, database)
    # Unhandled errors come back as 500 responses instead of being re-raised
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def register(client):
    """Sign a user up and in; returns their id and auth headers."""
    async def _register(handle: str, password: str = "pw1"):
        payload = {
            "handle": handle,
            "name": handle.title(),
            "email": f"{handle}@tweeter.io",
            "password": password,
        }
        signup = await client.post("/signup", json=payload)
        assert signup.status_code == 200, signup.text

        signin = await client.post("/signin", json={"email": payload["email"], "password": password})
        assert signin.status_code == 200, signin.text
        body = signin.json()
        return {
            "id": body["userId"],
            "headers": {"Authorization": f"Bearer {body['jwt']}"},
        }

    return _register
