"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly and translate them into
user-friendly messages or status codes.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class MissingFieldError(ValidationError):
    """A required input field was not supplied."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing required field: {field}")
        self.field = field


class InvalidReferenceError(ValidationError):
    """A foreign identifier does not resolve to an existing record."""

    def __init__(self, kind: str, ref_id: object = None) -> None:
        if ref_id is None:
            message = f"{kind.capitalize()} does not exist"
        else:
            message = f"{kind.capitalize()} with id {ref_id} does not exist"
        super().__init__(message)
        self.kind = kind
        self.ref_id = ref_id


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StorageError(DomainException):
    """The backing store could not be read or written."""
