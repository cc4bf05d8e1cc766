"""Closing price provider contract."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class ClosingPriceProvider(Protocol):
    """Interface for closing price retrieval."""

    def get_closes(self, symbol: str, start: datetime, end: datetime) -> list[float]:
        """Return closes in ascending timestamp order; empty when the period has none."""
