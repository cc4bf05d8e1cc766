"""Runtime wiring for the closing price report."""

from __future__ import annotations

import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime
from typing import TextIO

from fetchstock.config import Settings
from fetchstock.data.base import ClosingPriceProvider
from fetchstock.data.csv_data import CsvDataProvider
from fetchstock.data.yfinance_data import YFinanceDataProvider
from fetchstock.errors import DataProviderError
from fetchstock.logging.logger import ReportLogger
from fetchstock.report import REPORT_HEADER, ReportRow, build_report_row


@dataclass(frozen=True)
class SymbolOutcome:
    """Result of processing one symbol: a row, a silent skip, or a failure."""

    symbol: str
    row: ReportRow | None = None
    error: str | None = None


def build_data_provider(settings: Settings) -> ClosingPriceProvider:
    """Select data provider from the configured data source."""
    if settings.data_source == "csv":
        return CsvDataProvider(data_dir=settings.historical_data_dir)
    return YFinanceDataProvider()


def process_symbol(
    symbol: str,
    provider: ClosingPriceProvider,
    period_start: datetime,
    period_end: datetime,
    sma_window: int,
    logger: ReportLogger,
) -> SymbolOutcome:
    """Fetch one symbol's closes and build its report row."""
    try:
        closes = provider.get_closes(symbol, period_start, period_end)
    except DataProviderError as exc:
        logger.error(f"{symbol}: {exc}")
        return SymbolOutcome(symbol=symbol, error=str(exc))

    logger.symbol_fetched(symbol, len(closes))
    row = build_report_row(symbol, period_start, closes, sma_window=sma_window)
    if row is None:
        logger.symbol_skipped(symbol)
    else:
        logger.row_built(symbol, row.last_price, row.pct_change)
    return SymbolOutcome(symbol=symbol, row=row)


def collect_report_rows(
    settings: Settings,
    provider: ClosingPriceProvider,
    logger: ReportLogger,
    now: datetime | None = None,
) -> tuple[list[ReportRow], int]:
    """Process every configured symbol and return rows in symbol order plus a failure count."""
    if settings.period_start is None:
        raise ValueError("a period start date is required")
    period_start = settings.period_start
    period_end = settings.resolved_period_end(now)
    logger.run_started(settings.symbols, period_start, period_end, settings.data_source)

    def _process(symbol: str) -> SymbolOutcome:
        return process_symbol(
            symbol, provider, period_start, period_end, settings.sma_window, logger
        )

    if settings.workers > 1 and len(settings.symbols) > 1:
        with ThreadPoolExecutor(max_workers=settings.workers) as executor:
            outcomes = list(executor.map(_process, settings.symbols))
    else:
        outcomes = [_process(symbol) for symbol in settings.symbols]

    rows = [outcome.row for outcome in outcomes if outcome.row is not None]
    failed = sum(1 for outcome in outcomes if outcome.error is not None)
    logger.run_finished(len(rows), len(outcomes) - len(rows) - failed, failed)
    return rows, failed


def run(
    settings: Settings,
    out: TextIO | None = None,
    provider: ClosingPriceProvider | None = None,
) -> int:
    """Write the CSV report for all symbols; return 1 when any symbol failed."""
    stream = out or sys.stdout
    logger = ReportLogger(level=settings.log_level)
    data_provider = provider or build_data_provider(settings)

    print(REPORT_HEADER, file=stream)
    rows, failed = collect_report_rows(settings, data_provider, logger)
    for row in rows:
        print(row.to_csv(), file=stream)
    return 1 if failed else 0
