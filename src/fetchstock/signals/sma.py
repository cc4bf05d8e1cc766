"""Windowed simple moving average signal."""

from __future__ import annotations

import operator
from collections.abc import Sequence
from dataclasses import dataclass
from functools import reduce

from fetchstock.signals.base import Signal


@dataclass(frozen=True)
class WindowedSMA(Signal[list[float]]):
    """One simple moving average per full window, left to right.

    A series shorter than the window yields an empty list. An empty series or a
    window of one or less is not computable.
    """

    window_size: int = 30

    signal_id = "windowed_sma"

    def calculate(self, series: Sequence[float]) -> list[float] | None:
        n = self.window_size
        if not series or n <= 1:
            return None
        values = list(series)
        # Plain left-to-right addition; builtin sum() compensates on 3.12+.
        return [
            reduce(operator.add, values[start : start + n], 0.0) / n
            for start in range(len(values) - n + 1)
        ]
