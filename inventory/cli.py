"""Command line entry point for the inventory demos."""

import argparse
from pathlib import Path
from typing import Callable, Dict, List, Optional

from inventory.services.config_service import ConfigService, get_config_service
from inventory.services.finance_service import FinanceService
from inventory.services.grading_service import GradingService
from inventory.services.healthcare_service import HealthcareService
from inventory.services.records_service import RecordsService
from inventory.services.warehouse_service import WarehouseService
from inventory.utils.log_manager import LogCapture

DEMO_CHOICES = ("warehouse", "records", "healthcare", "grading", "finance", "all")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the typed inventory repository demos")
    parser.add_argument("demo", nargs="?", default="all", choices=DEMO_CHOICES,
                        help="Demo to run (default: all)")
    parser.add_argument("--data-file", type=Path, default=None,
                        help="Snapshot file for the records demo (default: from config)")
    parser.add_argument("--no-pause", action="store_true", help="Don't wait for Enter before exiting")
    parser.add_argument("--no-log", action="store_true", help="Don't capture the transcript to a log file")
    return parser


def get_demos(config_service: ConfigService, data_file: Optional[Path]) -> Dict[str, Callable[[], None]]:
    """Map demo names to their runners."""
    return {
        "warehouse": lambda: WarehouseService(config_service=config_service).run_demonstration(),
        "records": lambda: RecordsService(data_file=data_file, config_service=config_service).run(),
        "healthcare": lambda: HealthcareService(config_service=config_service).run(),
        "grading": lambda: GradingService(config_service=config_service).run(),
        "finance": lambda: FinanceService(config_service=config_service).run(),
    }


def run_demos(names: List[str], demos: Dict[str, Callable[[], None]]) -> None:
    """Run each demo in order; a crash in one demo is reported and the rest still run."""
    for name in names:
        try:
            demos[name]()
        except Exception as e:
            print(f"Application error in {name} demo: {type(e).__name__}: {e}")
        print()


def main(argv: Optional[List[str]] = None, config_service: Optional[ConfigService] = None) -> int:
    args = build_parser().parse_args(argv)
    config_service = config_service or get_config_service()

    demos = get_demos(config_service, args.data_file)
    names = list(demos) if args.demo == "all" else [args.demo]

    if args.no_log:
        run_demos(names, demos)
    else:
        with LogCapture(config_service.get_log_dir(), max_logs=config_service.get_max_logs()) as log:
            run_demos(names, demos)
        if log.get_log_path():
            print(f"Transcript saved to: {log.get_log_path()}")

    if not args.no_pause:
        input("Press Enter to exit...")

    return 0
