"""Typed repository - in-memory implementation with JSON snapshots."""

from pathlib import Path
from typing import Dict, List, Optional, Type, Union

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from inventory.models.dto import EntityRecord
from inventory.repositories.base import Repository, T
from inventory.repositories.exceptions import (
    DuplicateKeyError,
    NotFoundError,
    PersistenceError,
)

SNAPSHOT_INDENT = 2


class TypedRepository(Repository[T]):
    """
    Repository for entities of a single type, keyed by ``id``.

    Current implementation: In-memory (dict, insertion ordered)
    Persistence: optional whole-collection snapshot to a JSON file,
    enabled by passing the entity's record schema.
    """

    def __init__(self, record_model: Optional[Type[EntityRecord]] = None):
        self._items: Dict[int, T] = {}
        self.record_model = record_model

    @property
    def entity_name(self) -> str:
        """Display name of the stored entity type, used in error messages."""
        if self.record_model is not None:
            return self.record_model.entity_type.__name__
        return "Entity"

    def add(self, entity: T) -> T:
        """Add entity to memory."""
        if entity.id in self._items:
            raise DuplicateKeyError(self.entity_name, entity.id)
        self._items[entity.id] = entity
        return entity

    def get_by_id(self, id: int) -> T:
        """Get entity by ID."""
        try:
            return self._items[id]
        except KeyError:
            raise NotFoundError(self.entity_name, id) from None

    def remove_by_id(self, id: int) -> T:
        """Remove entity from memory."""
        if id not in self._items:
            raise NotFoundError(self.entity_name, id)
        return self._items.pop(id)

    def get_all(self) -> List[T]:
        """List all entities."""
        return list(self._items.values())

    def clear(self) -> None:
        """Drop every stored entity."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, id: object) -> bool:
        return id in self._items

    def save_to_file(self, path: Union[str, Path]) -> int:
        """
        Write every entity to ``path`` as an indented JSON array.

        Overwrites any existing file. The payload is built before the file
        is opened, so a serialization failure leaves the old file intact.

        Returns:
            Number of entities written

        Raises:
            PersistenceError: Serialization or I/O failure (cause chained)
        """
        path = Path(path)
        adapter = self._snapshot_adapter(path)

        try:
            records = [self.record_model.from_entity(e) for e in self._items.values()]
            payload = adapter.dump_json(records, indent=SNAPSHOT_INDENT, by_alias=True)
        except (ValidationError, PydanticSerializationError, TypeError) as e:
            raise PersistenceError(f"Error serializing snapshot for {path}: {e}", path) from e

        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(payload.decode("utf-8"))
        except OSError as e:
            raise PersistenceError(f"Could not write snapshot {path}: {e}", path) from e

        return len(records)

    def load_from_file(self, path: Union[str, Path]) -> int:
        """
        Replace the collection with the contents of ``path``.

        A missing or blank file is a fresh start: the repository becomes
        empty and no error is raised. A file that cannot be read or does not
        match the record schema also empties the repository, then raises.

        Returns:
            Number of entities loaded

        Raises:
            PersistenceError: Read, parse or validation failure (cause chained)
        """
        path = Path(path)
        adapter = self._snapshot_adapter(path)

        if not path.exists():
            self._items = {}
            return 0

        try:
            with open(path, encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            self._items = {}
            raise PersistenceError(f"Could not read snapshot {path}: {e}", path) from e

        if not content.strip():
            self._items = {}
            return 0

        try:
            records = adapter.validate_json(content)
        except ValidationError as e:
            self._items = {}
            raise PersistenceError(f"Invalid snapshot {path}: {e}", path) from e

        loaded: Dict[int, T] = {}
        for record in records:
            if record.id in loaded:
                self._items = {}
                raise PersistenceError(
                    f"Invalid snapshot {path}: duplicate {self.entity_name} ID {record.id}",
                    path,
                )
            loaded[record.id] = record.to_entity()

        self._items = loaded
        return len(loaded)

    def _snapshot_adapter(self, path: Path) -> TypeAdapter:
        """Get the list validator/serializer for this repository's record schema."""
        if self.record_model is None:
            raise PersistenceError(
                f"{type(self).__name__} has no record model; cannot persist to {path}",
                path,
            )
        return TypeAdapter(List[self.record_model])
