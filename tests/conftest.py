"""Pytest configuration and fixtures."""

import sys
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import Settings
from infrastructure.database.session import Database


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a throwaway SQLite file."""
    return Settings(
        app_env="test",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'todos.db'}",
    )


@pytest.fixture
async def database(settings: Settings) -> AsyncGenerator[Database, None]:
    """Initialized database gateway with an empty todos table."""
    db = Database(settings.async_database_url)
    await db.initialize()
    yield db
    await db.dispose()


@pytest.fixture
def app(settings: Settings, database: Database) -> FastAPI:
    """Application wired to the test database."""
    from main import create_app

    return create_app(settings=settings, database=database)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client.

    ASGITransport does not run the lifespan; the ``database`` fixture has
    already initialized the schema.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
