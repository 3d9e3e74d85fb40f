"""Typed inventory repositories.

A small library of generic, id-keyed in-memory repositories with:
- Duplicate / not-found / invalid-value error reporting
- Optional JSON snapshot save and load
- Console demos for warehouse stock, inventory records, prescriptions,
  student grading and finance transactions

Usage:
    ./run_demo.py            # From repo root
    python -m inventory all
"""

from .repositories import TypedRepository, InventoryRepository

__all__ = ['TypedRepository', 'InventoryRepository']
