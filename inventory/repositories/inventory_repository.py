"""Inventory repository - typed repository for quantity-bearing items."""

import dataclasses
from typing import List, TypeVar

from inventory.models.domain import QuantityEntity
from inventory.repositories.exceptions import InvalidValueError
from inventory.repositories.typed_repository import TypedRepository

Q = TypeVar('Q', bound=QuantityEntity)


class InventoryRepository(TypedRepository[Q]):
    """
    Repository for stock items that carry a ``quantity``.

    Items are immutable; a quantity change stores a new copy of the item
    with every other field left as it was.
    """

    def add(self, entity: Q) -> Q:
        """Add item to memory. Raises InvalidValueError for a negative quantity."""
        if entity.quantity < 0:
            raise InvalidValueError("quantity", entity.quantity, "quantity cannot be negative")
        return super().add(entity)

    def update_quantity(self, id: int, new_quantity: int) -> Q:
        """
        Set the stored quantity of an item.

        Args:
            id: Item ID
            new_quantity: Replacement quantity, must be >= 0

        Returns:
            The newly stored item

        Raises:
            InvalidValueError: new_quantity is negative
            NotFoundError: No item with this ID
        """
        if new_quantity < 0:
            raise InvalidValueError("quantity", new_quantity, "quantity cannot be negative")

        current = self.get_by_id(id)
        updated = dataclasses.replace(current, quantity=new_quantity)
        self._items[id] = updated
        return updated

    def get_out_of_stock(self) -> List[Q]:
        """Get all items with zero quantity."""
        return [item for item in self._items.values() if item.quantity == 0]

    def total_quantity(self) -> int:
        """Sum of quantities across all items."""
        return sum(item.quantity for item in self._items.values())
