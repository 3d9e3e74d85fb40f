"""Domain entities - internal representation (framework-agnostic)."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Protocol, runtime_checkable


@runtime_checkable
class Entity(Protocol):
    """Anything a repository can store: carries a unique integer id."""
    id: int


@runtime_checkable
class QuantityEntity(Entity, Protocol):
    """Entity with a stock quantity that can be updated in a repository."""
    name: str
    quantity: int


@dataclass(frozen=True)
class InventoryItem:
    """Inventory record entity."""
    id: int
    name: str
    quantity: int
    date_added: datetime

    def __str__(self) -> str:
        return (
            f"ID: {self.id}, Name: {self.name}, Quantity: {self.quantity}, "
            f"Date Added: {self.date_added:%Y-%m-%d %H:%M:%S}"
        )


@dataclass(frozen=True)
class ElectronicItem:
    """Electronic item entity."""
    id: int
    name: str
    quantity: int
    brand: str
    warranty_months: int

    def __str__(self) -> str:
        return (
            f"Electronic - ID: {self.id}, Name: {self.name}, Quantity: {self.quantity}, "
            f"Brand: {self.brand}, Warranty: {self.warranty_months} months"
        )


@dataclass(frozen=True)
class GroceryItem:
    """Grocery item entity."""
    id: int
    name: str
    quantity: int
    expiry_date: datetime

    def __str__(self) -> str:
        return (
            f"Grocery - ID: {self.id}, Name: {self.name}, Quantity: {self.quantity}, "
            f"Expires: {self.expiry_date:%Y-%m-%d}"
        )


@dataclass(frozen=True)
class Patient:
    """Patient entity."""
    id: int
    name: str
    age: int
    gender: str

    def __str__(self) -> str:
        return f"Patient ID: {self.id}, Name: {self.name}, Age: {self.age}, Gender: {self.gender}"


@dataclass(frozen=True)
class Prescription:
    """Prescription entity, linked to a patient by id."""
    id: int
    patient_id: int
    medication_name: str
    date_issued: datetime

    def __str__(self) -> str:
        return (
            f"Prescription ID: {self.id}, Medication: {self.medication_name}, "
            f"Issued: {self.date_issued:%Y-%m-%d}"
        )


GRADE_BANDS = (
    ("A", 80, 100),
    ("B", 70, 79),
    ("C", 60, 69),
    ("D", 50, 59),
)


@dataclass(frozen=True)
class Student:
    """Student result entity."""
    id: int
    full_name: str
    score: int

    @property
    def grade(self) -> str:
        """Letter grade; anything outside the A-D bands (including > 100) is F."""
        for letter, low, high in GRADE_BANDS:
            if low <= self.score <= high:
                return letter
        return "F"

    def __str__(self) -> str:
        return f"{self.full_name} (ID: {self.id}): Score = {self.score}, Grade = {self.grade}"


@dataclass(frozen=True)
class Transaction:
    """Financial transaction entity."""
    id: int
    date: datetime
    amount: Decimal
    category: str
