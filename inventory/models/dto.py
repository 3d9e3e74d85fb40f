"""Data Transfer Objects - JSON snapshot contracts."""

from dataclasses import asdict
from datetime import datetime
from decimal import Decimal
from typing import Any, ClassVar, Type

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from inventory.models.domain import (
    ElectronicItem,
    GroceryItem,
    InventoryItem,
    Patient,
    Prescription,
    Student,
    Transaction,
)


class EntityRecord(BaseModel):
    """
    Base record schema for one entity in a snapshot file.

    Field names are written in camelCase (``dateAdded``), unknown keys are
    rejected and values are not coerced, so a file that drifts from the
    expected shape fails to load instead of half-loading.
    """

    entity_type: ClassVar[Type[Any]]

    id: int

    model_config = ConfigDict(
        alias_generator=to_camel,
        extra="forbid",
        strict=True,
    )

    @classmethod
    def from_entity(cls, entity: Any) -> "EntityRecord":
        """Build a record from a domain entity."""
        data = asdict(entity)
        return cls.model_validate({
            cls.model_fields[name].alias or name: value for name, value in data.items()
        })

    def to_entity(self) -> Any:
        """Convert record back to its domain entity."""
        return self.entity_type(**self.model_dump())


class InventoryItemRecord(EntityRecord):
    """Snapshot record for InventoryItem."""
    entity_type: ClassVar[Type[Any]] = InventoryItem

    name: str
    quantity: int = Field(ge=0)
    date_added: datetime


class ElectronicItemRecord(EntityRecord):
    """Snapshot record for ElectronicItem."""
    entity_type: ClassVar[Type[Any]] = ElectronicItem

    name: str
    quantity: int = Field(ge=0)
    brand: str
    warranty_months: int = Field(ge=0)


class GroceryItemRecord(EntityRecord):
    """Snapshot record for GroceryItem."""
    entity_type: ClassVar[Type[Any]] = GroceryItem

    name: str
    quantity: int = Field(ge=0)
    expiry_date: datetime


class PatientRecord(EntityRecord):
    """Snapshot record for Patient."""
    entity_type: ClassVar[Type[Any]] = Patient

    name: str
    age: int = Field(ge=0)
    gender: str


class PrescriptionRecord(EntityRecord):
    """Snapshot record for Prescription."""
    entity_type: ClassVar[Type[Any]] = Prescription

    patient_id: int
    medication_name: str
    date_issued: datetime


class StudentRecord(EntityRecord):
    """Snapshot record for Student. Scores outside 0-100 are kept and graded F."""
    entity_type: ClassVar[Type[Any]] = Student

    full_name: str
    score: int


class TransactionRecord(EntityRecord):
    """Snapshot record for Transaction. Amounts are written as decimal strings."""
    entity_type: ClassVar[Type[Any]] = Transaction

    date: datetime
    amount: Decimal = Field(gt=0)
    category: str
