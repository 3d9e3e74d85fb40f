"""Repository layer: id-keyed entity storage and JSON snapshots."""

from inventory.repositories.exceptions import (
    ErrorKind,
    RepositoryError,
    DuplicateKeyError,
    NotFoundError,
    InvalidValueError,
    PersistenceError,
)
from inventory.repositories.base import Repository
from inventory.repositories.typed_repository import TypedRepository
from inventory.repositories.inventory_repository import InventoryRepository

__all__ = [
    'ErrorKind',
    'RepositoryError',
    'DuplicateKeyError',
    'NotFoundError',
    'InvalidValueError',
    'PersistenceError',
    'Repository',
    'TypedRepository',
    'InventoryRepository',
]
