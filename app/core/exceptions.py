"""Domain exceptions raised by the stores and translated by the app.

The exception handlers registered in ``app.bootstrap`` turn these into
HTTP responses, e.g. ``EntityNotFoundError`` -> 404 ``{"error": "Not Found"}``.
"""
from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class EntityNotFoundError(DomainError):
    """Raised when no stored entity carries the requested id."""

    def __init__(self, entity: str, identifier: Any) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} with id {identifier} not found")


class SeedDataError(DomainError):
    """Raised when the startup seed file cannot be loaded."""
