"""Closing price provider implementations."""

from .base import ClosingPriceProvider
from .csv_data import CsvDataProvider
from .yfinance_data import YFinanceDataProvider

__all__ = [
    "ClosingPriceProvider",
    "CsvDataProvider",
    "YFinanceDataProvider",
]
