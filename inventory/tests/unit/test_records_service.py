"""Unit tests for RecordsService."""

import json
import pytest

from inventory.services.records_service import RecordsService
from inventory.services.config_service import DATA_FILE_ENV


class TestRecordsService:
    """Test the save / clear / load session."""

    @pytest.fixture
    def data_file(self, tmp_path):
        return tmp_path / "inventory_data.json"

    @pytest.fixture
    def service(self, data_file, config_service):
        return RecordsService(data_file=data_file, config_service=config_service)

    def test_seed_sample_data(self, service):
        """Test five records are seeded."""
        assert service.seed_sample_data() == 5
        assert [item.id for item in service.repository.get_all()] == [1, 2, 3, 4, 5]

    def test_seed_twice_skips_duplicates(self, service, capsys):
        """Test re-seeding reports each duplicate and adds nothing."""
        service.seed_sample_data()
        capsys.readouterr()

        assert service.seed_sample_data() == 0
        assert capsys.readouterr().out.count("Skipped item:") == 5

    def test_save_clear_load(self, service, data_file):
        """Test data survives discarding the in-memory repository."""
        service.seed_sample_data()
        before = service.repository.get_all()

        assert service.save_data() is True
        service.clear_memory()
        assert service.repository.get_all() == []

        assert service.load_data() is True
        assert service.repository.get_all() == before

        saved = json.loads(data_file.read_text(encoding="utf-8"))
        assert saved[0]["name"] == "Wireless Headphones"
        assert "dateAdded" in saved[0]

    def test_load_without_file(self, service, capsys):
        """Test loading before any save starts empty."""
        assert service.load_data() is True
        assert service.repository.get_all() == []
        assert "does not exist" in capsys.readouterr().out

    def test_load_corrupt_file(self, service, data_file, capsys):
        """Test a corrupt file is reported and memory is emptied."""
        service.seed_sample_data()
        data_file.write_text("[{broken", encoding="utf-8")

        assert service.load_data() is False
        assert service.repository.get_all() == []
        assert "Load failed" in capsys.readouterr().out

    def test_save_failure(self, tmp_path, config_service, capsys):
        """Test a save to a missing directory is reported."""
        service = RecordsService(data_file=tmp_path / "nope" / "data.json", config_service=config_service)
        service.seed_sample_data()

        assert service.save_data() is False
        assert len(service.repository) == 5
        assert "Save failed" in capsys.readouterr().out

    def test_data_file_from_env(self, monkeypatch, tmp_path, config_service):
        """Test the data file falls back to configuration."""
        monkeypatch.setenv(DATA_FILE_ENV, str(tmp_path / "env.json"))

        assert RecordsService(config_service=config_service).data_file == tmp_path / "env.json"

    def test_record_immutability(self, capsys):
        """Test the immutability demo leaves the original intact."""
        original = RecordsService.demonstrate_record_immutability()

        assert original.quantity == 10
        assert original.name == "Test Item"
        assert "Modified Test Item" in capsys.readouterr().out

    def test_run(self, service, data_file, capsys):
        """Test the full session ends with the reloaded records."""
        service.run()

        out = capsys.readouterr().out
        assert "Successfully saved 5 items to file." in out
        assert "Successfully loaded 5 items from file." in out
        assert len(service.repository) == 5
        assert data_file.exists()
