"""Transcript capture and rotation for demo runs.

Captures all terminal output (stdout/stderr) to timestamped log files
with automatic rotation (keeps newest N logs). Each log starts with a
short header describing the run.

Usage:
    from inventory.utils.log_manager import LogCapture

    with LogCapture(log_dir) as log:
        # Your code here - all output automatically captured
        service.run()

    # Log file automatically saved and rotated
"""

import platform
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional, TextIO


class TeeWriter:
    """Write to multiple streams simultaneously (tee-like behavior).

    Fails gracefully - if writing to one stream fails, continues with others.
    """

    def __init__(self, *streams: TextIO):
        self.streams = streams

    def write(self, data: str) -> None:
        """Write data to all streams."""
        if not isinstance(data, str):
            data = str(data)

        for stream in self.streams:
            try:
                stream.write(data)
                stream.flush()
            except (OSError, ValueError):
                continue

    def flush(self) -> None:
        """Flush all streams."""
        for stream in self.streams:
            try:
                stream.flush()
            except (OSError, ValueError):
                continue

    def isatty(self) -> bool:
        """Delegate to the first stream (typically stdout/stderr)."""
        if self.streams:
            try:
                return self.streams[0].isatty()
            except (AttributeError, ValueError):
                pass
        return False


class LogCapture:
    """Context manager for capturing terminal output to log files.

    Automatically:
    - Captures stdout and stderr
    - Displays output to terminal (tee behavior)
    - Saves to timestamped log file
    - Rotates logs (keeps newest max_logs)

    If the log directory or file cannot be created, capture is disabled
    and the wrapped code runs normally.

    Attributes:
        log_dir: Directory where logs are stored
        max_logs: Maximum number of logs to keep (clamped to 1..100)
    """

    def __init__(self, log_dir: Path, max_logs: int = 10, title: str = "Inventory Demo"):
        self.log_dir = Path(log_dir)
        self.max_logs = max(1, min(max_logs, 100))
        self.title = title
        self.log_file: Optional[Path] = None
        self.log_handle: Optional[TextIO] = None
        self._logging_enabled = False

        self._original_stdout = sys.stdout if sys.stdout is not None else sys.__stdout__
        self._original_stderr = sys.stderr if sys.stderr is not None else sys.__stderr__

    def __enter__(self):
        """Start log capture."""
        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            self.log_file = self._generate_log_filename()
            self.log_handle = open(self.log_file, 'w', encoding='utf-8')
            self._write_log_header()
        except OSError as e:
            print(f"Warning: transcript logging disabled ({e})", file=self._original_stderr)
            if self.log_handle:
                self.log_handle.close()
            self.log_handle = None
            self.log_file = None
            return self

        sys.stdout = TeeWriter(self._original_stdout, self.log_handle)
        sys.stderr = TeeWriter(self._original_stderr, self.log_handle)
        self._logging_enabled = True
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Stop log capture and finalize log file.

        Always restores original stdout/stderr. Never suppresses the
        wrapped code's exception.
        """
        sys.stdout = self._original_stdout
        sys.stderr = self._original_stderr

        if self._logging_enabled and self.log_handle:
            try:
                if exc_type is not None:
                    self.log_handle.write(f"\n{'='*80}\n")
                    self.log_handle.write(f"FATAL ERROR: {exc_type.__name__}: {exc_val}\n")
                    self.log_handle.write(f"{'='*80}\n")
            finally:
                self.log_handle.close()

            try:
                self._rotate_logs()
            except OSError as e:
                print(f"Warning: log rotation failed ({e})", file=self._original_stderr)

        return False

    def _generate_log_filename(self) -> Path:
        """Generate timestamped log filename.

        Format: YYYYMMDD_HHMMSS_microseconds_<osname>.log
        Microseconds keep names unique within the same second.
        """
        now = datetime.now()
        timestamp = now.strftime("%Y%m%d_%H%M%S")
        microseconds = f"{now.microsecond:06d}"
        os_name = platform.system().lower() or "unknown"
        return self.log_dir / f"{timestamp}_{microseconds}_{os_name}.log"

    def _write_log_header(self) -> None:
        """Write metadata header to log file."""
        command_str = ' '.join(str(arg) for arg in sys.argv)

        header = f"""{'='*80}
{self.title} Log
{'='*80}
Timestamp:       {datetime.now().strftime("%Y-%m-%d %H:%M:%S")}
Python Version:  {sys.version.split()[0]}
Platform:        {platform.platform()}
Command:         {command_str}
{'='*80}

"""
        self.log_handle.write(header)
        self.log_handle.flush()

    def _rotate_logs(self) -> None:
        """Keep only the newest max_logs log files."""
        for old_log in get_recent_logs(self.log_dir, count=None)[self.max_logs:]:
            old_log.unlink()

    def get_log_path(self) -> Optional[Path]:
        """Get path to current log file, or None if not capturing."""
        return self.log_file


def get_recent_logs(log_dir: Path, count: Optional[int] = 10) -> List[Path]:
    """Get log files in ``log_dir``, newest first.

    Args:
        log_dir: Directory containing logs
        count: Number of logs to return (None for all)
    """
    log_dir = Path(log_dir)
    if not log_dir.exists():
        return []

    log_files = sorted(
        log_dir.glob("*.log"),
        key=lambda p: (p.stat().st_mtime, p.name),
        reverse=True
    )

    return log_files if count is None else log_files[:count]
