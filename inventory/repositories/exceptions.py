"""Repository-level exceptions."""

from enum import Enum
from pathlib import Path
from typing import Optional, Union


class ErrorKind(str, Enum):
    """Closed set of repository failure kinds."""
    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    INVALID_VALUE = "invalid_value"
    PERSISTENCE = "persistence"


class RepositoryError(Exception):
    """Base exception for repository operations."""
    kind: ErrorKind


class DuplicateKeyError(RepositoryError):
    """Raised when adding an entity whose id is already stored."""
    kind = ErrorKind.DUPLICATE_KEY

    def __init__(self, entity_type: str, identifier: int):
        self.entity_type = entity_type
        self.identifier = identifier
        super().__init__(f"{entity_type} with ID {identifier} already exists")


class NotFoundError(RepositoryError):
    """Raised when a requested id is not stored."""
    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity_type: str, identifier: int):
        self.entity_type = entity_type
        self.identifier = identifier
        super().__init__(f"{entity_type} with ID {identifier} not found")


class InvalidValueError(RepositoryError):
    """Raised when a field update would break an entity invariant."""
    kind = ErrorKind.INVALID_VALUE

    def __init__(self, field: str, value: object, reason: str):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field} {value!r}: {reason}")


class PersistenceError(RepositoryError):
    """Raised when a snapshot cannot be written or read.

    The underlying cause (OSError, validation error, ...) is chained
    as ``__cause__``.
    """
    kind = ErrorKind.PERSISTENCE

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        super().__init__(message)
