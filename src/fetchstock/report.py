"""Report rows built from closing price signals."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from fetchstock.signals import MaxPrice, MinPrice, PriceDifference, WindowedSMA

REPORT_HEADER = "period start,symbol,price,change %,min,max,30d avg"
DEFAULT_SMA_WINDOW = 30


@dataclass(frozen=True)
class ReportRow:
    """One symbol's statistics for the reporting period."""

    period_start: datetime
    symbol: str
    last_price: float
    pct_change: float
    period_min: float
    period_max: float
    sma_last: float

    def to_csv(self) -> str:
        return (
            f"{self.period_start.isoformat()},{self.symbol},"
            f"${self.last_price:.2f},{self.pct_change * 100.0:.2f}%,"
            f"${self.period_min:.2f},${self.period_max:.2f},${self.sma_last:.2f}"
        )


def build_report_row(
    symbol: str,
    period_start: datetime,
    closes: Sequence[float],
    sma_window: int = DEFAULT_SMA_WINDOW,
) -> ReportRow | None:
    """Compute every signal for one symbol.

    Returns None for an empty series so the caller emits no row. Signals that
    are not computable fall back to 0.0 (or an empty average series) here, not
    inside the signals themselves.
    """
    if not closes:
        return None

    period_max = MaxPrice().calculate(closes)
    period_min = MinPrice().calculate(closes)
    _, pct_change = PriceDifference().calculate(closes) or (0.0, 0.0)
    sma = WindowedSMA(window_size=sma_window).calculate(closes) or []

    return ReportRow(
        period_start=period_start,
        symbol=symbol,
        last_price=closes[-1],
        pct_change=pct_change,
        period_min=period_min if period_min is not None else 0.0,
        period_max=period_max if period_max is not None else 0.0,
        sma_last=sma[-1] if sma else 0.0,
    )
