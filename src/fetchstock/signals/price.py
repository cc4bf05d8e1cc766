"""Difference and extreme-value signals."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from functools import reduce

from fetchstock.signals.base import Signal


@dataclass(frozen=True)
class PriceDifference(Signal[tuple[float, float]]):
    """Absolute and relative change between the first and last close.

    A first close of exactly 0.0 is divided as 1.0, so the relative value is
    the absolute change rather than a true ratio in that case.
    """

    signal_id = "price_difference"

    def calculate(self, series: Sequence[float]) -> tuple[float, float] | None:
        if not series:
            return None
        first, last = series[0], series[-1]
        abs_diff = last - first
        base = 1.0 if first == 0.0 else first
        return abs_diff, abs_diff / base


def _lower(acc: float, value: float) -> float:
    # NaN never compares lower, so it is never selected.
    return value if value < acc else acc


def _higher(acc: float, value: float) -> float:
    return value if value > acc else acc


@dataclass(frozen=True)
class MinPrice(Signal[float]):
    """Lowest close of the period."""

    signal_id = "min_price"

    def calculate(self, series: Sequence[float]) -> float | None:
        if not series:
            return None
        return reduce(_lower, series, sys.float_info.max)


@dataclass(frozen=True)
class MaxPrice(Signal[float]):
    """Highest close of the period."""

    signal_id = "max_price"

    def calculate(self, series: Sequence[float]) -> float | None:
        if not series:
            return None
        return reduce(_higher, series, -sys.float_info.max)
