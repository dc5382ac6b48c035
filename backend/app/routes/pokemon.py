"""
Pokedex Backend - Pokemon Route Handlers
=========================================

What:  The five /pokemon endpoints.
How:   Each handler receives a fresh PokemonRepository (bound to the request's
       session) through Depends(), delegates to `pokemon_service` and wraps the
       result in the `{"data": ...}` envelope.
Who:   Any API client; interactive docs at /docs.

Route order:
    /pokemon/count is declared before /pokemon/{name}, otherwise "count"
    would be captured as a Pokemon name.

DELETE /pokemon removes every record, not a single one. Clients that expect
per-resource deletion must not call it.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from app.repositories.pokemon_repository import PokemonRepository, get_pokemon_repository
from app.schemas.pokemon import (
    CountResponse,
    ErrorResponse,
    MessageEnvelope,
    PokemonCreate,
    PokemonEnvelope,
    PokemonPageEnvelope,
)
from app.services.pokemon_service import pokemon_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pokemon", tags=["Pokemon"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=PokemonEnvelope,
    responses={
        201: {"description": "Pokemon created", "model": PokemonEnvelope},
        500: {"description": "Failed to create the Pokemon", "model": ErrorResponse},
    },
    summary="Create a Pokemon",
)
async def create_pokemon(
    payload: PokemonCreate,
    repo: PokemonRepository = Depends(get_pokemon_repository),
) -> PokemonEnvelope:
    created = await pokemon_service.create_pokemon(
        repo, name=payload.name, pokemon_type=payload.type
    )
    return PokemonEnvelope(data=created)


@router.get(
    "",
    response_model=PokemonPageEnvelope,
    responses={
        200: {"description": "One page of Pokemon", "model": PokemonPageEnvelope},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List Pokemon with page-based pagination",
)
async def list_pokemon(
    limit: Optional[str] = Query(
        default=None,
        description=(
            "Pokemon per page (default 50, max 100). Missing, zero, negative "
            "or non-integer values use the default 50."
        ),
    ),
    page: Optional[str] = Query(
        default=None,
        description=(
            "Page number, starting at 1. Values below 1 and non-integer values "
            "use page 1. Pages past the end return no items."
        ),
    ),
    repo: PokemonRepository = Depends(get_pokemon_repository),
) -> PokemonPageEnvelope:
    """
    Return a page of Pokemon together with the total count.

    `limit` and `page` are taken as strings so that malformed values fall back
    to their defaults instead of failing with 422:

        GET /pokemon                    → limit=50,  page=1
        GET /pokemon?limit=250          → limit=100, page=1
        GET /pokemon?limit=5&page=2     → items 6..10
        GET /pokemon?page=abc           → page=1
    """
    result = await pokemon_service.list_pokemon(repo, limit=limit, page=page)
    return PokemonPageEnvelope(data=result)


@router.get(
    "/count",
    response_model=CountResponse,
    summary="Count all stored Pokemon",
)
async def count_pokemon(
    repo: PokemonRepository = Depends(get_pokemon_repository),
) -> CountResponse:
    total = await pokemon_service.count_pokemon(repo)
    return CountResponse(total=total)


@router.get(
    "/{name}",
    response_model=PokemonEnvelope,
    responses={
        200: {"description": "Pokemon found", "model": PokemonEnvelope},
        404: {"description": "Pokemon not found", "model": ErrorResponse},
    },
    summary="Get a Pokemon by exact name",
)
async def get_pokemon(
    name: str,
    repo: PokemonRepository = Depends(get_pokemon_repository),
) -> PokemonEnvelope:
    pokemon = await pokemon_service.get_pokemon(repo, name=name)
    return PokemonEnvelope(data=pokemon)


@router.delete(
    "",
    response_model=MessageEnvelope,
    responses={
        200: {"description": "All Pokemon deleted", "model": MessageEnvelope},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete ALL Pokemon",
    description="Removes every stored Pokemon. There is no confirmation and no undo.",
)
async def delete_all_pokemon(
    repo: PokemonRepository = Depends(get_pokemon_repository),
) -> MessageEnvelope:
    message = await pokemon_service.delete_all_pokemon(repo)
    return MessageEnvelope(data=message)
