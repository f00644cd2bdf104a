"""
Dog House API - Exception Hierarchy
===================================

What:  Application-specific exceptions for the error cases the API reports.
How:   Each exception carries a user-facing message and an optional context
       dict. Global handlers registered in main.py turn them into JSON
       responses with the matching HTTP status.
Who:   Raised by the store and the resource handlers; caught by the handlers
       in main.register_exception_handlers.

Exception Hierarchy:
    DogHouseAPIError (base)
    ├── NotFoundError      → 404 Not Found        {"error": "<Entity> not found"}
    ├── ValidationError    → 422 Unprocessable    {"error": "<message>"}
    └── DatabaseError      → 500 Internal Error   {"error": "<generic message>"}

Every failed lookup by identifier raises NotFoundError, whether the lookup
comes from a nested or a top-level route.
"""

from typing import Any, Dict, Optional


class DogHouseAPIError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in a response)
        context:  Additional debug info (logged, never returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(DogHouseAPIError):
    """
    Raised when a lookup by identifier yields no record.

    The message is built from the entity's display name, e.g.
    NotFoundError("Dog house", "42") → "Dog house not found".
    """

    def __init__(
        self,
        entity: str = "Record",
        identifier: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["entity"] = entity
        if identifier is not None:
            ctx["identifier"] = str(identifier)
        super().__init__(message=f"{entity} not found", context=ctx)
        self.entity = entity
        self.identifier = identifier


class ValidationError(DogHouseAPIError):
    """
    Raised when submitted data is well-formed but cannot be accepted.

    Example: a review whose dog_house_id references no dog house.
    Schema-level problems (missing fields, failed type coercion) are
    reported by FastAPI's own 422 handling before reaching the services.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class DatabaseError(DogHouseAPIError):
    """
    Raised when a database operation fails unexpectedly.

    The message returned to the client is always generic; the original
    error type travels in `context` for the server-side log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
