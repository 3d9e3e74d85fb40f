"""Inventory utilities package."""

from .log_manager import LogCapture, TeeWriter, get_recent_logs

__all__ = [
    "LogCapture",
    "TeeWriter",
    "get_recent_logs",
]
