"""
Pokedex Backend - Pagination Window
====================================

What:  Turns the raw `limit` / `page` query values of GET /pokemon into an
       effective window (limit, page, offset).
How:   Pure functions, no I/O; the service passes the result straight to
       PokemonRepository.find_and_count(take=limit, skip=offset).

Rules:
    limit:  missing, non-numeric, zero or negative → 50; then capped at 100
    page:   missing, non-numeric or zero → 1; then floored at 1 (no upper bound)
    offset: (page - 1) * limit; a window whose offset exceeds a 64-bit
            integer is past the end of any table and yields no items

    GET /pokemon?limit=500&page=-3  →  limit=100, page=1, offset=0
    GET /pokemon?limit=5&page=2     →  limit=5,   page=2, offset=5
"""

from dataclasses import dataclass
from typing import Optional, Union

DEFAULT_LIMIT = 50
MAX_LIMIT = 100
DEFAULT_PAGE = 1

# Largest OFFSET a 64-bit SQL integer can hold
MAX_OFFSET = 2**63 - 1

RawNumber = Optional[Union[str, int]]


@dataclass(frozen=True)
class PaginationWindow:
    limit: int
    page: int

    @property
    def offset(self) -> int:
        """Zero-based index of the first record in this window."""
        return (self.page - 1) * self.limit

    @property
    def beyond_store_range(self) -> bool:
        """True when the offset cannot be sent to the database as an integer."""
        return self.offset > MAX_OFFSET


def _parse_int(raw: RawNumber) -> Optional[int]:
    """Integer value of a query parameter, or None when it is not a whole number."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError:
        return None


def resolve_limit(raw: RawNumber) -> int:
    limit = _parse_int(raw)
    if not limit or limit < 0:
        limit = DEFAULT_LIMIT
    return min(limit, MAX_LIMIT)


def resolve_page(raw: RawNumber) -> int:
    page = _parse_int(raw) or DEFAULT_PAGE
    return max(page, 1)


def resolve_window(limit: RawNumber = None, page: RawNumber = None) -> PaginationWindow:
    """Build the effective pagination window from raw query values."""
    return PaginationWindow(limit=resolve_limit(limit), page=resolve_page(page))
