"""Warehouse service - stock management over electronics and groceries."""

from datetime import datetime, timedelta
from typing import Optional

from inventory.models.domain import ElectronicItem, GroceryItem
from inventory.models.dto import ElectronicItemRecord, GroceryItemRecord
from inventory.repositories.exceptions import (
    DuplicateKeyError,
    InvalidValueError,
    NotFoundError,
    RepositoryError,
)
from inventory.repositories.inventory_repository import InventoryRepository, Q
from inventory.services.config_service import ConfigService, get_config_service


class WarehouseService:
    """
    Service for warehouse stock operations.

    Responsibilities:
    - Seed electronics and grocery repositories from configuration
    - Apply stock changes through the repository contract
    - Report every failed operation and carry on with the next one

    Does NOT:
    - Store items itself (that's repository layer)
    """

    def __init__(
        self,
        electronics: Optional[InventoryRepository[ElectronicItem]] = None,
        groceries: Optional[InventoryRepository[GroceryItem]] = None,
        config_service: Optional[ConfigService] = None,
    ):
        self.electronics = electronics if electronics is not None else InventoryRepository(ElectronicItemRecord)
        self.groceries = groceries if groceries is not None else InventoryRepository(GroceryItemRecord)
        self.config_service = config_service or get_config_service()

    def seed_data(self) -> int:
        """Load sample electronics and groceries. Returns number of items added."""
        print("--- Seeding Sample Data ---")
        added = 0
        now = datetime.now()
        try:
            for row in self.config_service.get_seed("electronics"):
                self.electronics.add(ElectronicItemRecord.model_validate(row).to_entity())
                added += 1

            for row in self.config_service.get_seed("groceries"):
                self.groceries.add(GroceryItem(
                    id=row["id"],
                    name=row["name"],
                    quantity=row["quantity"],
                    expiry_date=now + timedelta(days=row.get("expiresInDays", 0)),
                ))
                added += 1

            print("Sample data seeded successfully!")
        except RepositoryError as e:
            print(f"Error seeding data: {e}")
        print()
        return added

    @staticmethod
    def print_all_items(repo: InventoryRepository[Q]) -> None:
        """Print every item of a repository, one per line."""
        items = repo.get_all()
        if not items:
            print("No items found in inventory.")
        else:
            for item in items:
                print(f"  • {item}")
        print()

    @staticmethod
    def increase_stock(repo: InventoryRepository[Q], id: int, quantity: int) -> Optional[Q]:
        """
        Add ``quantity`` to an item's stock.

        Returns:
            The updated item, or None if the change was rejected
        """
        try:
            item = repo.get_by_id(id)
            updated = repo.update_quantity(id, item.quantity + quantity)
        except (NotFoundError, InvalidValueError) as e:
            print(f"Failed to increase stock: {e}")
            return None

        print(f"Successfully increased stock for item ID {id}. New quantity: {updated.quantity}")
        return updated

    @staticmethod
    def remove_item_by_id(repo: InventoryRepository[Q], id: int) -> bool:
        """Remove an item, reporting what was removed. Returns True on success."""
        try:
            item = repo.remove_by_id(id)
        except NotFoundError as e:
            print(f"Failed to remove item: {e}")
            return False

        print(f"Successfully removed item: {item.name} (ID: {id})")
        return True

    def run_demonstration(self) -> None:
        """Seed, list, provoke each error kind, then apply a valid stock change."""
        print("=== Warehouse Inventory Management System ===")
        print()

        self.seed_data()

        print("--- All Grocery Items ---")
        self.print_all_items(self.groceries)

        print("--- All Electronic Items ---")
        self.print_all_items(self.electronics)

        print("--- Testing Exception Handling ---")

        print("1. Trying to add duplicate item...")
        try:
            self.electronics.add(ElectronicItem(1, "Duplicate Phone", 5, "Generic", 6))
        except DuplicateKeyError as e:
            print(f"Caught expected exception: {e}")
        print()

        print("2. Trying to remove non-existent item...")
        self.remove_item_by_id(self.electronics, 999)
        print()

        print("3. Trying to update with negative quantity...")
        try:
            self.electronics.update_quantity(1, -5)
        except InvalidValueError as e:
            print(f"Caught expected exception: {e}")
        print()

        print("--- Successful Operations ---")
        print("Increasing stock for item ID 1...")
        self.increase_stock(self.electronics, 1, 10)
        print()

        print("Final Electronic Items after stock increase:")
        self.print_all_items(self.electronics)
