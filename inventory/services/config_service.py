"""
Configuration service for demo settings.

Provides a single source of truth for file locations and sample data,
with environment variable overrides for the data file and log directory.
"""

import json
import os
from pathlib import Path
from typing import Dict, List, Any, Optional

DATA_FILE_ENV = "INVENTORY_DATA_FILE"
LOG_DIR_ENV = "INVENTORY_LOG_DIR"

DEFAULT_MAX_LOGS = 10


class ConfigService:
    """Service for loading and providing demo configuration."""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize the configuration service.

        Args:
            config_path: Path to configuration JSON file.
                        Defaults to inventory/config/demo_config.json
        """
        if config_path is None:
            package_dir = Path(__file__).parent.parent
            config_path = package_dir / "config" / "demo_config.json"

        self.config_path = config_path
        self._config = None

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from JSON file.

        Returns:
            Dictionary containing all configuration

        Raises:
            FileNotFoundError: If config file doesn't exist
            json.JSONDecodeError: If config file is invalid JSON
        """
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        with open(self.config_path, 'r', encoding='utf-8') as f:
            return json.load(f)

    @property
    def config(self) -> Dict[str, Any]:
        """Get the full configuration (cached)."""
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def get_data_file(self) -> Path:
        """Get the snapshot file used by the records demo.

        ``INVENTORY_DATA_FILE`` takes precedence over the ``dataFile`` key.
        """
        override = os.environ.get(DATA_FILE_ENV)
        if override:
            return Path(override)
        return Path(self.config.get("dataFile", "inventory_data.json"))

    def get_log_dir(self) -> Path:
        """Get the directory for captured demo transcripts."""
        override = os.environ.get(LOG_DIR_ENV)
        if override:
            return Path(override)
        return Path(self.config.get("logDir", "logs"))

    def get_max_logs(self) -> int:
        """Get how many transcript logs to keep."""
        return int(self.config.get("maxLogs", DEFAULT_MAX_LOGS))

    def get_grading_input_file(self) -> Path:
        """Get the student input file used by the grading demo."""
        return Path(self.config.get("gradingInputFile", "students_input.txt"))

    def get_grading_report_file(self) -> Path:
        """Get the report file written by the grading demo."""
        return Path(self.config.get("gradingReportFile", "grade_report.txt"))

    def get_finance_account(self) -> Dict[str, str]:
        """Get the account number and opening balance for the finance demo."""
        return self.config.get("financeAccount", {"accountNumber": "SAV-12345", "initialBalance": "1000"})

    def get_seed(self, name: str) -> List[Dict[str, Any]]:
        """Get sample rows for one seed set (e.g. 'electronics').

        Returns:
            List of row dictionaries, empty if the set is not configured
        """
        return self.config.get("seed", {}).get(name, [])


# Global instance for easy import
_config_service = None

def get_config_service() -> ConfigService:
    """Get the global configuration service instance.

    Returns:
        ConfigService instance
    """
    global _config_service
    if _config_service is None:
        _config_service = ConfigService()
    return _config_service
