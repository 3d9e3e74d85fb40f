"""Records service - inventory records persisted across sessions."""

import dataclasses
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional

from inventory.models.domain import InventoryItem
from inventory.models.dto import InventoryItemRecord
from inventory.repositories.exceptions import PersistenceError, RepositoryError
from inventory.repositories.inventory_repository import InventoryRepository
from inventory.services.config_service import ConfigService, get_config_service


class RecordsService:
    """
    Service for the inventory records session.

    Seeds immutable inventory records, writes them to a JSON snapshot,
    throws the in-memory repository away and restores it from disk.
    """

    def __init__(
        self,
        data_file: Optional[Path] = None,
        config_service: Optional[ConfigService] = None,
    ):
        self.config_service = config_service or get_config_service()
        self.data_file = Path(data_file) if data_file is not None else self.config_service.get_data_file()
        self.repository = self._new_repository()

    @staticmethod
    def _new_repository() -> InventoryRepository[InventoryItem]:
        return InventoryRepository(InventoryItemRecord)

    def seed_sample_data(self) -> int:
        """Add the configured sample records. Returns number added."""
        print("--- Seeding Sample Inventory Data ---")
        added = 0
        now = datetime.now()
        for row in self.config_service.get_seed("inventory"):
            item = InventoryItem(
                id=row["id"],
                name=row["name"],
                quantity=row["quantity"],
                date_added=now - timedelta(days=row.get("daysAgo", 0)),
            )
            try:
                self.repository.add(item)
            except RepositoryError as e:
                print(f"Skipped item: {e}")
                continue
            print(f"Added item with ID {item.id} to inventory log.")
            added += 1

        print("Sample data seeded successfully!")
        print()
        return added

    def save_data(self) -> bool:
        """Write the repository to the data file. Returns True on success."""
        print("--- Saving Data to Disk ---")
        print(f"Saving inventory data to file: {self.data_file}")
        try:
            count = self.repository.save_to_file(self.data_file)
        except PersistenceError as e:
            print(f"Save failed: {e}")
            print()
            return False

        print(f"Successfully saved {count} items to file.")
        print()
        return True

    def load_data(self) -> bool:
        """Replace the repository with the data file contents. Returns True on success."""
        print("--- Loading Data from Disk ---")
        if not self.data_file.exists():
            print(f"File {self.data_file} does not exist. Starting with empty inventory log.")

        try:
            count = self.repository.load_from_file(self.data_file)
        except PersistenceError as e:
            print(f"Load failed: {e}")
            print("Starting with empty inventory log.")
            print()
            return False

        print(f"Successfully loaded {count} items from file.")
        print()
        return True

    def clear_memory(self) -> None:
        """Discard the in-memory repository, as if starting a new session."""
        print("--- Simulating New Session (Clearing Memory) ---")
        self.repository = self._new_repository()
        print("Memory cleared. Repository reinitialized.")
        print()

    def print_all_items(self) -> None:
        """Print every record currently in memory."""
        print("--- Current Inventory Items ---")
        items = self.repository.get_all()

        if not items:
            print("No items found in inventory log.")
            return

        print(f"Total items: {len(items)}")
        print()
        for item in items:
            print(f"  • ID: {item.id}")
            print(f"    Name: {item.name}")
            print(f"    Quantity: {item.quantity}")
            print(f"    Date Added: {item.date_added:%Y-%m-%d %H:%M:%S}")
            print()

    @staticmethod
    def demonstrate_record_immutability() -> InventoryItem:
        """Show that modifying a record yields a copy. Returns the original."""
        print("--- Demonstrating Record Immutability ---")

        original = InventoryItem(999, "Test Item", 10, datetime.now())
        print(f"Original item: {original}")

        modified = dataclasses.replace(original, quantity=20, name="Modified Test Item")
        print(f"Modified copy: {modified}")
        print(f"Original unchanged: {original}")

        print("Record immutability confirmed - original item remains unchanged!")
        print()
        return original

    def run(self) -> None:
        """Seed, save, clear, reload and print the records."""
        print("=== Inventory Records Management System ===")
        print()

        self.demonstrate_record_immutability()
        self.seed_sample_data()

        print("Items currently in memory:")
        self.print_all_items()

        self.save_data()
        self.clear_memory()

        print("After clearing memory:")
        self.print_all_items()

        self.load_data()

        print("After loading from file:")
        self.print_all_items()

        print("=== System Test Complete ===")
        print(f"Check the file: {self.data_file.resolve()}")
