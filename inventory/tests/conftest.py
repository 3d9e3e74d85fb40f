"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

# Add repo root for imports when running from a source checkout
repo_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(repo_root))

import pytest
from datetime import datetime

from inventory.models.domain import InventoryItem, ElectronicItem
from inventory.services.config_service import ConfigService, DATA_FILE_ENV, LOG_DIR_ENV


@pytest.fixture(autouse=True)
def clear_env_overrides(monkeypatch):
    """Keep developer environment overrides out of tests."""
    monkeypatch.delenv(DATA_FILE_ENV, raising=False)
    monkeypatch.delenv(LOG_DIR_ENV, raising=False)


@pytest.fixture
def config_service():
    """Config service reading the bundled demo configuration."""
    return ConfigService()


@pytest.fixture
def inventory_items():
    """Three inventory records with distinct dates."""
    return [
        InventoryItem(1, "Wireless Headphones", 25, datetime(2026, 1, 5, 9, 30, 0)),
        InventoryItem(2, "Gaming Keyboard", 15, datetime(2026, 1, 7, 14, 0, 0, 250000)),
        InventoryItem(3, "USB-C Cable", 0, datetime(2026, 1, 10, 8, 15, 45)),
    ]


@pytest.fixture
def electronic_items():
    """Two electronic items."""
    return [
        ElectronicItem(1, "Samsung Galaxy S23", 15, "Samsung", 24),
        ElectronicItem(2, "MacBook Pro M3", 8, "Apple", 12),
    ]
