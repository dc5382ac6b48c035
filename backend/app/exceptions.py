"""
Pokedex Backend - Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for the error scenarios of the API.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return JSON responses with the matching HTTP status code.
Who:   Raised by services; caught by the handlers in main.py.

Exception Hierarchy:
    PokedexError (base)
    ├── NotFoundError   → 404 Not Found
    └── DatabaseError   → 500 Internal Server Error

Anything else raised while handling a request falls through to the
catch-all handler and becomes a generic 500.
"""

from typing import Any, Dict, Optional


class PokedexError(Exception):
    """
    Base exception for all Pokedex application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(PokedexError):
    """
    Raised when a requested resource does not exist.

    When:    GET /pokemon/{name} with a name that matches no record.
    HTTP:    404 Not Found, with a null `data` payload.

    SQLAlchemy returns None for missing rows; the service converts that None
    into this exception so the route stays free of status-code branching.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(PokedexError):
    """
    Raised when a write to the record store fails.

    When:    Insert rejected by the database, connection lost mid-flush.
    HTTP:    500 Internal Server Error

    The message is always generic. Driver details (SQL, constraint names)
    go into `context` and are only logged server-side.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
