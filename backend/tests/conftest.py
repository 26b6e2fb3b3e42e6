"""Root conftest — shared test configuration and database/app fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The FastAPI app gets a container wired to that database
    - bcrypt uses the minimum cost factor so tests stay fast
"""

import os

# Ensure tests never use real secrets or a real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("ACCESS_TOKEN_KEY", "test-access-token-key")
os.environ.setdefault("REFRESH_TOKEN_KEY", "test-refresh-token-key")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from forum.config import Settings  # noqa: E402
from forum.container import build_container  # noqa: E402
from forum.db.base import Base  # noqa: E402
from forum.infrastructure.database import DatabaseSessionManager  # noqa: E402
from forum.main import app  # noqa: E402
import forum.models  # noqa: E402,F401


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        access_token_key="test-access-token-key",
        refresh_token_key="test-refresh-token-key",
        access_token_age=3000,
        bcrypt_rounds=4,
    )


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def db(test_engine) -> DatabaseSessionManager:
    return DatabaseSessionManager.from_engine(test_engine)


@pytest.fixture
def container(test_settings, db):
    return build_container(test_settings, db)


@pytest.fixture
async def client(container):
    """FastAPI test client with the container pointed at the test DB."""
    app.state.container = container
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    del app.state.container
