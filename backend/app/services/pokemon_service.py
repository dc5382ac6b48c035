"""
Pokedex Backend - Pokemon Service
==================================

What:  Business logic behind the /pokemon endpoints.
How:   Receives the per-request PokemonRepository from the route, applies the
       pagination window, converts entities into response schemas, and turns
       missing records and failed writes into application exceptions.
Who:   Called by app/routes/pokemon.py.

Operation → Repository call:
    create_pokemon       → insert(Pokemon)
    list_pokemon         → find_and_count(take=limit, skip=offset)
    count_pokemon        → count()
    get_pokemon          → find_one(name)
    delete_all_pokemon   → clear()

Error Handling:
    Only create_pokemon() translates store failures (→ DatabaseError, 500 with a
    generic message). Failures on reads and on delete_all_pokemon() propagate
    unchanged to the catch-all handler in main.py.

The service holds no state; every call works on the repository it is given.
"""

import logging

from app.exceptions import DatabaseError, NotFoundError
from app.models.pokemon import Pokemon
from app.repositories.pokemon_repository import PokemonRepository
from app.schemas.pokemon import PokemonPage, PokemonResponse
from app.services.pagination import RawNumber, resolve_window

logger = logging.getLogger(__name__)

CREATE_FAILED_MESSAGE = "Failed to create Pokemon."
DELETED_MESSAGE = "Pokemons deleted successfully!"


class PokemonService:
    """Stateless orchestration of PokemonRepository calls."""

    async def create_pokemon(
        self, repo: PokemonRepository, name: str, pokemon_type: str
    ) -> PokemonResponse:
        """
        Persist a new Pokemon and return it.

        No content checks happen here: empty names and duplicate names are
        stored as given.

        Raises:
            DatabaseError: the insert failed (→ 500)
        """
        pokemon = Pokemon(name=name, type=pokemon_type)
        try:
            created = await repo.insert(pokemon)
        except Exception as e:
            logger.error("Failed to insert Pokemon '%s': %s", name, str(e), exc_info=True)
            raise DatabaseError(
                message=CREATE_FAILED_MESSAGE,
                context={"name": name, "error_type": e.__class__.__name__},
            )

        logger.info("Pokemon created: %s (id=%s, type=%s)", created.name, created.id, created.type)
        return PokemonResponse.model_validate(created)

    async def list_pokemon(
        self,
        repo: PokemonRepository,
        limit: RawNumber = None,
        page: RawNumber = None,
    ) -> PokemonPage:
        """
        Return one page of Pokemon plus the total count.

        `limit` and `page` are raw query values; see app/services/pagination.py
        for how they are clamped.
        """
        window = resolve_window(limit, page)
        if window.beyond_store_range:
            # No table holds that many rows; only the total is worth a query
            items, total = [], await repo.count()
        else:
            items, total = await repo.find_and_count(take=window.limit, skip=window.offset)
        logger.debug(
            "Listed %d of %d Pokemon (limit=%d, page=%d, offset=%d)",
            len(items), total, window.limit, window.page, window.offset,
        )
        return PokemonPage(
            items=[PokemonResponse.model_validate(item) for item in items],
            total=total,
            limit=window.limit,
            page=window.page,
        )

    async def count_pokemon(self, repo: PokemonRepository) -> int:
        return await repo.count()

    async def get_pokemon(self, repo: PokemonRepository, name: str) -> PokemonResponse:
        """
        Exact-match lookup by name.

        Raises:
            NotFoundError: no record has this name (→ 404, null data)
        """
        pokemon = await repo.find_one(name)
        if pokemon is None:
            raise NotFoundError(resource="Pokemon", resource_id=name)
        return PokemonResponse.model_validate(pokemon)

    async def delete_all_pokemon(self, repo: PokemonRepository) -> str:
        """
        Remove every stored Pokemon. Irreversible; safe to repeat.

        Returns:
            The confirmation message for the response body
        """
        await repo.clear()
        logger.info("All Pokemon records deleted")
        return DELETED_MESSAGE


# ── Singleton Instance ────────────────────────────────────────────────────
pokemon_service = PokemonService()
