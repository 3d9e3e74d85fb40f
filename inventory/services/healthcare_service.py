"""Healthcare service - patients and their prescriptions."""

from datetime import datetime, timedelta
from typing import Dict, List, Optional

from inventory.models.domain import Patient, Prescription
from inventory.models.dto import PatientRecord, PrescriptionRecord
from inventory.repositories.exceptions import NotFoundError, RepositoryError
from inventory.repositories.typed_repository import TypedRepository
from inventory.services.config_service import ConfigService, get_config_service


class HealthcareService:
    """
    Service for patient and prescription lookups.

    Prescriptions are grouped by patient ID into a lookup map, rebuilt
    on demand from the prescription repository.
    """

    def __init__(
        self,
        patients: Optional[TypedRepository[Patient]] = None,
        prescriptions: Optional[TypedRepository[Prescription]] = None,
        config_service: Optional[ConfigService] = None,
    ):
        self.patients = patients if patients is not None else TypedRepository(PatientRecord)
        self.prescriptions = prescriptions if prescriptions is not None else TypedRepository(PrescriptionRecord)
        self.config_service = config_service or get_config_service()
        self._prescription_map: Dict[int, List[Prescription]] = {}

    def seed_data(self) -> int:
        """Load sample patients and prescriptions. Returns number added."""
        print("--- Seeding Sample Data ---")
        added = 0
        now = datetime.now()
        try:
            for row in self.config_service.get_seed("patients"):
                self.patients.add(PatientRecord.model_validate(row).to_entity())
                added += 1

            for row in self.config_service.get_seed("prescriptions"):
                self.prescriptions.add(Prescription(
                    id=row["id"],
                    patient_id=row["patientId"],
                    medication_name=row["medicationName"],
                    date_issued=now - timedelta(days=row.get("daysAgo", 0)),
                ))
                added += 1

            print("Sample data seeded successfully.")
        except RepositoryError as e:
            print(f"Error seeding data: {e}")
        print()
        return added

    def build_prescription_map(self) -> Dict[int, List[Prescription]]:
        """Group all prescriptions by patient ID."""
        prescription_map: Dict[int, List[Prescription]] = {}
        for prescription in self.prescriptions.get_all():
            prescription_map.setdefault(prescription.patient_id, []).append(prescription)

        self._prescription_map = prescription_map
        return prescription_map

    def get_prescriptions_by_patient_id(self, patient_id: int) -> List[Prescription]:
        """Get a copy of a patient's prescriptions (empty if none)."""
        return list(self._prescription_map.get(patient_id, []))

    def print_all_patients(self) -> None:
        """Print every patient."""
        print("--- All Patients ---")
        patients = self.patients.get_all()
        if not patients:
            print("No patients found.")
        for patient in patients:
            print(patient)
        print()

    def print_prescriptions_for_patient(self, patient_id: int) -> bool:
        """
        Print a patient's prescriptions, oldest first.

        Returns:
            False if the patient does not exist
        """
        print(f"--- Prescriptions for Patient ID {patient_id} ---")
        try:
            patient = self.patients.get_by_id(patient_id)
        except NotFoundError as e:
            print(e)
            print()
            return False

        print(f"Patient: {patient.name}")
        prescriptions = self.get_prescriptions_by_patient_id(patient_id)
        if prescriptions:
            print(f"Total prescriptions: {len(prescriptions)}")
            print()
            for prescription in sorted(prescriptions, key=lambda p: p.date_issued):
                print(f"  • {prescription}")
        else:
            print("No prescriptions found for this patient.")
        print()
        return True

    def run(self) -> None:
        """Seed, build the lookup map and print prescriptions for a few patients."""
        print("=== Healthcare Management System ===")
        print()

        self.seed_data()

        print("--- Building Prescription Map ---")
        prescription_map = self.build_prescription_map()
        print(f"Prescription map built with {len(prescription_map)} patient groups.")
        print()

        self.print_all_patients()

        print("--- Demonstrating Prescription Lookup ---")
        for patient_id in (1, 2, 4):
            self.print_prescriptions_for_patient(patient_id)
