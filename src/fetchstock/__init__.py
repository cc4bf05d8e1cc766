"""Closing price signals and CSV reports for ticker symbols."""

__version__ = "0.1.0"
