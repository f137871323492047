"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A field-level constraint was violated.

    ``field`` names the offending attribute when one can be singled out.
    """

    def __init__(self, reason: str, field: str | None = None) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}" if field else reason)


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvalidArgumentError(DomainException):
    """A mutation was called with an out-of-range parameter."""


class ConflictError(DomainException):
    """A uniqueness or concurrent-modification conflict."""
