"""
Pokedex Backend - Database Session Management
==============================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   Creates an async engine with connection pooling, provides a session
       dependency that commits on success and rolls back on error.
Who:   Used by the repository dependency in routes via FastAPI's Depends().
When:  Engine is created at module import; sessions are created per-request.

Connection Pooling:
    One pooled engine is shared by the process. Each request acquires its own
    AsyncSession (and therefore its own connection) and releases it when the
    request finishes:

        request ─▶ get_db_session() ─▶ PokemonRepository(session) ─▶ commit/rollback ─▶ close

    pool_size / max_overflow come from settings. SQLite URLs skip them because
    aiosqlite in-memory databases run on a static pool that rejects sizing args.
"""

import logging
from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import settings

logger = logging.getLogger(__name__)


def _engine_options() -> Dict[str, Any]:
    """Engine keyword arguments for the configured database backend."""
    options: Dict[str, Any] = {
        "pool_pre_ping": settings.db_pool_pre_ping,
        # Echo SQL in DEBUG mode only
        "echo": settings.log_level == "DEBUG",
    }
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_recycle=3600,
        )
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(settings.database_url, **_engine_options())

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: entities stay readable after the dependency commits,
# so response serialization never triggers a lazy load outside the session.
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Models register with `Base.metadata`, which Alembic reads for
    --autogenerate and `create_tables()` uses for local bootstrapping.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On success: commits the transaction
        4. On error: rolls back the transaction and re-raises
        5. Always: closes the session (returns connection to pool)

    The commit in step 3 may run after the response is sent, so code whose
    result the client must observe commits itself (see PokemonRepository).

    Raises:
        Any database exception is propagated to the global error handlers.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_tables() -> None:
    """
    What:  Creates any missing tables registered on `Base.metadata`.
    When:  During startup when DB_AUTO_CREATE is enabled.
    Note:  Does not alter existing tables; schema changes go through Alembic.
    """
    # Imported for its side effect of registering the table on Base.metadata
    from app.models.pokemon import Pokemon  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured")


async def dispose_engine() -> None:
    """Gracefully closes all connections in the pool on shutdown."""
    await engine.dispose()
