"""Concise human-readable run logger."""

from __future__ import annotations

import logging
from datetime import datetime


def setup_logger(log_level: str = "INFO") -> logging.Logger:
    """Configure and return the app logger.

    Log lines go to stderr so the CSV report on stdout stays clean.
    """
    logger = logging.getLogger("fetchstock")
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    logger.propagate = False

    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s | %(message)s", "%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
    return logger


class ReportLogger:
    """Console logger with fixed line types."""

    def __init__(self, level: str = "INFO", logger: logging.Logger | None = None) -> None:
        self._logger = logger or setup_logger(level)

    def run_started(
        self,
        symbols: list[str],
        period_start: datetime,
        period_end: datetime,
        source: str,
    ) -> None:
        self._logger.info(
            "run | %s | %s -> %s | source %s",
            ",".join(symbols),
            self._short_date(period_start),
            self._short_date(period_end),
            source,
        )

    def symbol_fetched(self, symbol: str, closes: int) -> None:
        self._logger.debug("fetch | %s | closes %d", symbol, closes)

    def symbol_skipped(self, symbol: str) -> None:
        self._logger.info("skip | %s | no closing prices in period", symbol)

    def row_built(self, symbol: str, last_price: float, pct_change: float) -> None:
        self._logger.debug(
            "row | %s | last $%s | change %s",
            symbol,
            f"{last_price:,.2f}",
            f"{pct_change * 100.0:+.2f}%",
        )

    def error(self, message: str) -> None:
        self._logger.error("error | %s", message)

    def run_finished(self, rows: int, skipped: int, failed: int) -> None:
        self._logger.info("done | rows %d | skipped %d | failed %d", rows, skipped, failed)

    @staticmethod
    def _short_date(value: datetime) -> str:
        return value.strftime("%Y-%m-%d")
