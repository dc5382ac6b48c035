"""
Pokedex Backend - Pokemon Repository
=====================================

What:  Generic record-store operations for the `pokemon` table.
How:   Each method issues one SQLAlchemy statement (find_and_count issues two)
       on the session it was constructed with. Write paths (insert, clear)
       commit themselves, because FastAPI may run the code after `yield` in
       `get_db_session` only once the response is already sent. Rollback on
       error and closing stay with `get_db_session`.
Who:   Constructed per request by `get_pokemon_repository`; used by PokemonService.

Ordering:
    find_and_count orders by id ascending, i.e. insertion order, so page N
    is stable as long as nothing is inserted or deleted between requests.
"""

import logging
from typing import List, Optional, Tuple

from fastapi import Depends
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.models.pokemon import Pokemon

logger = logging.getLogger(__name__)


class PokemonRepository:
    """Record store for Pokemon entities, bound to a single session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def insert(self, pokemon: Pokemon) -> Pokemon:
        """
        Persist a new record and return it with its identity assigned.

        Commits before returning: the row is durable and visible to other
        connections before the route sends its 201, and commit failures
        surface here instead of after the response.
        """
        self.session.add(pokemon)
        await self.session.flush()
        await self.session.commit()
        return pokemon

    async def find_one(self, name: str) -> Optional[Pokemon]:
        """Exact-match lookup by name; returns the first match or None."""
        result = await self.session.execute(
            select(Pokemon).where(Pokemon.name == name).order_by(Pokemon.id).limit(1)
        )
        return result.scalar_one_or_none()

    async def find_and_count(self, take: int, skip: int) -> Tuple[List[Pokemon], int]:
        """
        Return one page of records and the total record count.

        Args:
            take: Maximum number of records to return (LIMIT)
            skip: Number of records to skip (OFFSET)

        Returns:
            (items, total) where total ignores take/skip
        """
        result = await self.session.execute(
            select(Pokemon).order_by(Pokemon.id).offset(skip).limit(take)
        )
        items = list(result.scalars().all())
        total = await self.count()
        return items, total

    async def count(self) -> int:
        result = await self.session.execute(select(func.count(Pokemon.id)))
        return result.scalar() or 0

    async def clear(self) -> None:
        """Delete every record in the table and commit."""
        await self.session.execute(delete(Pokemon))
        await self.session.commit()


# ── Dependency ────────────────────────────────────────────────────────────
async def get_pokemon_repository(
    session: AsyncSession = Depends(get_db_session),
) -> PokemonRepository:
    """FastAPI dependency: a fresh repository around the request's session."""
    return PokemonRepository(session)
