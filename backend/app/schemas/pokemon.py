"""
Pokedex Backend - Pydantic Request/Response Schemas
====================================================

What:  Pydantic models defining the API contract of the /pokemon endpoints.
How:   FastAPI validates request bodies against these models, serializes
       responses through them, and builds the OpenAPI docs from them.
Who:   Used by route handlers as request/response types and by the service
       as its return types.

Response envelope:
    Every /pokemon response except the count wraps its payload in `data`:
        {"data": {...}}            entity, page or message
        {"data": null, ...}        not found / errors
        {"total": 12}              count
"""

from typing import List, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class PokemonCreate(BaseModel):
    """
    Body of POST /pokemon.

    Both fields must be present and be strings. Their content is not checked:
    empty strings and already-used names are accepted.
    """
    name: str = Field(description="Pokemon name", examples=["Pikachu"])
    type: str = Field(description="Pokemon type", examples=["Electric"])


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class PokemonResponse(BaseModel):
    """Serialized Pokemon record."""
    id: int = Field(description="Database-assigned identifier")
    name: str = Field(description="Pokemon name")
    type: str = Field(description="Pokemon type")

    model_config = {"from_attributes": True}


class PokemonPage(BaseModel):
    """
    One page of the Pokemon list.

    `total` counts every stored record, not just the ones on this page.
    `limit` and `page` echo the effective (clamped) window, which may differ
    from what the client asked for.
    """
    items: List[PokemonResponse] = Field(description="Records in this page")
    total: int = Field(description="Total number of stored records")
    limit: int = Field(description="Effective page size (max 100)")
    page: int = Field(description="Effective page number (min 1)")


class PokemonEnvelope(BaseModel):
    data: PokemonResponse


class PokemonPageEnvelope(BaseModel):
    data: PokemonPage


class MessageEnvelope(BaseModel):
    data: str = Field(description="Human-readable outcome message")


class CountResponse(BaseModel):
    total: int = Field(description="Total number of stored records")


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Error body returned by the global exception handlers.

    `data` holds the generic message for write failures and null otherwise,
    so clients reading only `data` still get the documented contract.
    """
    data: Optional[str] = Field(default=None, description="Null, or a generic failure message")
    error: str = Field(description="Machine-readable error code")
    message: Optional[str] = Field(default=None, description="Human-readable description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
