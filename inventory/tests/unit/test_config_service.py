"""Unit tests for ConfigService."""

import json
import pytest
from pathlib import Path

from inventory.services.config_service import (
    ConfigService,
    get_config_service,
    DATA_FILE_ENV,
    LOG_DIR_ENV,
)


class TestConfigService:
    """Test configuration loading and overrides."""

    @pytest.fixture
    def config_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "dataFile": "custom.json",
            "logDir": "custom_logs",
            "maxLogs": 3,
            "seed": {"patients": [{"id": 1, "name": "A", "age": 3, "gender": "Female"}]},
        }), encoding="utf-8")
        return path

    def test_bundled_config(self, config_service):
        """Test the bundled configuration has every seed set."""
        assert config_service.get_data_file() == Path("inventory_data.json")
        assert config_service.get_max_logs() == 10
        for name in ("inventory", "electronics", "groceries", "patients", "prescriptions",
                     "students", "transactions"):
            assert config_service.get_seed(name)

    def test_custom_config(self, config_file):
        """Test values come from the given file."""
        service = ConfigService(config_file)

        assert service.get_data_file() == Path("custom.json")
        assert service.get_log_dir() == Path("custom_logs")
        assert service.get_max_logs() == 3
        assert service.get_seed("patients")[0]["name"] == "A"

    def test_grading_and_finance_settings(self, config_service, config_file):
        """Test demo file names and the finance account, with defaults when absent."""
        assert config_service.get_grading_input_file() == Path("students_input.txt")
        assert config_service.get_grading_report_file() == Path("grade_report.txt")
        assert config_service.get_finance_account()["accountNumber"] == "SAV-12345"

        custom = ConfigService(config_file)
        assert custom.get_grading_report_file() == Path("grade_report.txt")
        assert custom.get_finance_account()["initialBalance"] == "1000"

    def test_unknown_seed_set(self, config_file):
        """Test unknown seed sets are empty."""
        assert ConfigService(config_file).get_seed("unknown") == []

    def test_env_overrides(self, config_file, monkeypatch, tmp_path):
        """Test environment variables beat the config file."""
        monkeypatch.setenv(DATA_FILE_ENV, str(tmp_path / "env.json"))
        monkeypatch.setenv(LOG_DIR_ENV, str(tmp_path / "env_logs"))
        service = ConfigService(config_file)

        assert service.get_data_file() == tmp_path / "env.json"
        assert service.get_log_dir() == tmp_path / "env_logs"

    def test_missing_config_file(self, tmp_path):
        """Test a missing config file raises on first access."""
        service = ConfigService(tmp_path / "missing.json")

        with pytest.raises(FileNotFoundError):
            service.get_data_file()

    def test_config_is_cached(self, config_file):
        """Test the file is read once."""
        service = ConfigService(config_file)
        first = service.config
        config_file.write_text("{}", encoding="utf-8")

        assert service.config is first

    def test_global_instance(self):
        """Test the global accessor returns a singleton."""
        assert get_config_service() is get_config_service()
