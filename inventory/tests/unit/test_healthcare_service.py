"""Unit tests for HealthcareService."""

import pytest
from datetime import datetime

from inventory.models.domain import Patient, Prescription
from inventory.repositories import TypedRepository
from inventory.services.healthcare_service import HealthcareService


class TestHealthcareService:
    """Test prescription grouping and lookup."""

    @pytest.fixture
    def service(self, config_service):
        service = HealthcareService(config_service=config_service)
        service.seed_data()
        return service

    def test_seed_data(self, service):
        """Test patients and prescriptions are seeded."""
        assert len(service.patients) == 3
        assert len(service.prescriptions) == 5

    def test_build_prescription_map(self, service):
        """Test prescriptions are grouped per patient."""
        prescription_map = service.build_prescription_map()

        assert sorted(prescription_map) == [1, 2, 3]
        assert [p.id for p in prescription_map[1]] == [101, 102]
        assert [p.id for p in prescription_map[3]] == [105]

    def test_get_prescriptions_returns_copy(self, service):
        """Test callers can't modify the lookup map."""
        service.build_prescription_map()

        prescriptions = service.get_prescriptions_by_patient_id(2)
        prescriptions.clear()

        assert len(service.get_prescriptions_by_patient_id(2)) == 2

    def test_get_prescriptions_unknown_patient(self, service):
        """Test an unknown patient has no prescriptions."""
        service.build_prescription_map()

        assert service.get_prescriptions_by_patient_id(4) == []

    def test_print_prescriptions_sorted_by_date(self, config_service, capsys):
        """Test prescriptions print oldest first."""
        patients = TypedRepository()
        patients.add(Patient(1, "Alice Johnson", 28, "Female"))
        prescriptions = TypedRepository()
        prescriptions.add(Prescription(2, 1, "Newer", datetime(2026, 2, 1)))
        prescriptions.add(Prescription(1, 1, "Older", datetime(2026, 1, 1)))
        service = HealthcareService(patients, prescriptions, config_service)
        service.build_prescription_map()

        assert service.print_prescriptions_for_patient(1) is True

        out = capsys.readouterr().out
        assert out.index("Older") < out.index("Newer")

    def test_print_prescriptions_unknown_patient(self, service, capsys):
        """Test an unknown patient is reported, not raised."""
        service.build_prescription_map()
        capsys.readouterr()

        assert service.print_prescriptions_for_patient(4) is False
        assert "Patient with ID 4 not found" in capsys.readouterr().out

    def test_patient_without_prescriptions(self, service, capsys):
        """Test a patient with no prescriptions."""
        service.patients.add(Patient(9, "Dan Lee", 50, "Male"))
        service.build_prescription_map()
        capsys.readouterr()

        assert service.print_prescriptions_for_patient(9) is True
        assert "No prescriptions found for this patient." in capsys.readouterr().out

    def test_run(self, config_service, capsys):
        """Test the full narrative."""
        HealthcareService(config_service=config_service).run()

        out = capsys.readouterr().out
        assert "Prescription map built with 3 patient groups." in out
        assert "Patient: Bob Smith" in out
        assert "Patient with ID 4 not found" in out
