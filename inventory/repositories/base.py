"""Base repository interface."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, List

from inventory.models.domain import Entity
from inventory.repositories.exceptions import NotFoundError

T = TypeVar('T', bound=Entity)


class Repository(ABC, Generic[T]):
    """
    Base repository interface.

    Entities are keyed by their integer ``id``. Lookups of a missing id
    raise NotFoundError instead of returning None, so callers branch on
    the exception kind.
    """

    @abstractmethod
    def add(self, entity: T) -> T:
        """Add a new entity. Raises DuplicateKeyError if the id exists."""
        pass

    @abstractmethod
    def get_by_id(self, id: int) -> T:
        """Get entity by ID. Raises NotFoundError if absent."""
        pass

    @abstractmethod
    def remove_by_id(self, id: int) -> T:
        """Remove entity by ID and return it. Raises NotFoundError if absent."""
        pass

    @abstractmethod
    def get_all(self) -> List[T]:
        """List all entities (a copy, in insertion order)."""
        pass

    def exists(self, id: int) -> bool:
        """Check whether an entity with this ID is stored."""
        try:
            self.get_by_id(id)
        except NotFoundError:
            return False
        return True
