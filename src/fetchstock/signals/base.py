"""Signal contract shared by every price series statistic."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Generic, TypeVar

T = TypeVar("T")


class Signal(ABC, Generic[T]):
    """Pure statistic over an ascending series of closing prices.

    Implementations must not mutate the series or keep state between calls.
    ``None`` means the statistic is not computable for the given series; it is
    never an error.
    """

    signal_id: str

    @abstractmethod
    def calculate(self, series: Sequence[float]) -> T | None:
        """Return the statistic for ``series``, or None when not computable."""
