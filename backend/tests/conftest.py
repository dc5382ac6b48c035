"""
Pokedex Backend - Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_repository: AsyncMock standing in for PokemonRepository
    ├── db_engine: in-memory SQLite engine with the schema created
    ├── db_session: AsyncSession on db_engine (repository tests)
    ├── test_client: HTTPX AsyncClient talking to the app, with
    │                get_db_session overridden to use db_engine
    └── seed_pokemon: helper inserting N records through db_engine
"""

import os

# Settings are read at import time; set the environment before importing app.*
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DB_AUTO_CREATE"] = "false"

from typing import AsyncGenerator  # noqa: E402
from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.database import Base, get_db_session  # noqa: E402
from app.models.pokemon import Pokemon  # noqa: E402
from app.repositories.pokemon_repository import PokemonRepository  # noqa: E402


@pytest.fixture
def mock_repository():
    """
    Provides a mock PokemonRepository.

    Usage:
        async def test_get(mock_repository):
            mock_repository.find_one.return_value = Pokemon(id=1, name="Pikachu", type="Electric")
            result = await pokemon_service.get_pokemon(mock_repository, "Pikachu")
    """
    repo = AsyncMock(spec=PokemonRepository)
    repo.insert = AsyncMock()
    repo.find_one = AsyncMock(return_value=None)
    repo.find_and_count = AsyncMock(return_value=([], 0))
    repo.count = AsyncMock(return_value=0)
    repo.clear = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def sample_pokemon_data():
    return {"name": "Pikachu", "type": "Electric"}


@pytest_asyncio.fixture
async def db_engine():
    """
    In-memory SQLite engine with the schema created.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def seed_pokemon(session_factory):
    """Returns an async helper that inserts `count` records named Pokemon-1..N."""

    async def _seed(count: int, type_: str = "Normal") -> None:
        async with session_factory() as session:
            session.add_all(
                [Pokemon(name=f"Pokemon-{i}", type=type_) for i in range(1, count + 1)]
            )
            await session.commit()

    return _seed


@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    Provides an async HTTP test client for endpoint testing.

    get_db_session is overridden with the same commit/rollback/close cycle,
    but backed by the in-memory test database.

    Usage:
        async def test_count(test_client):
            response = await test_client.get("/pokemon/count")
            assert response.status_code == 200
    """
    from app.main import app

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
