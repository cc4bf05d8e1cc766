"""Logging helpers."""

from .logger import ReportLogger, setup_logger

__all__ = ["ReportLogger", "setup_logger"]
