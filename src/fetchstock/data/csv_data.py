"""CSV-backed closing price provider."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pandas as pd

from fetchstock.errors import DataProviderError


class CsvDataProvider:
    """Load closing prices from local ``<SYMBOL>.csv`` files."""

    date_column_candidates = ("date", "datetime", "timestamp")
    close_column_candidates = ("adj close", "adj_close", "adjclose", "close")

    def __init__(self, data_dir: str) -> None:
        self.data_dir = Path(data_dir)
        self._frames: dict[str, pd.Series] = {}

    def get_closes(self, symbol: str, start: datetime, end: datetime) -> list[float]:
        closes = self._load_closes(symbol)
        window = closes[(closes.index >= _utc(start)) & (closes.index <= _utc(end))]
        return [float(value) for value in window]

    def _load_closes(self, symbol: str) -> pd.Series:
        cached = self._frames.get(symbol)
        if cached is not None:
            return cached

        path = self._resolve_path(symbol)
        if path is None:
            raise DataProviderError(f"No CSV found for {symbol} under {self.data_dir}")
        try:
            frame = pd.read_csv(path)
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
            raise DataProviderError(f"Could not read {path}: {exc}") from exc
        closes = self._normalize_csv(frame, path)
        self._frames[symbol] = closes
        return closes

    def _resolve_path(self, symbol: str) -> Path | None:
        bare = symbol.strip()
        for name in (bare.upper(), bare.lower(), bare):
            candidate = self.data_dir / f"{name}.csv"
            if candidate.exists():
                return candidate
        return None

    def _normalize_csv(self, frame: pd.DataFrame, path: Path) -> pd.Series:
        columns = {str(column).strip().lower(): column for column in frame.columns}
        date_column = next(
            (columns[name] for name in self.date_column_candidates if name in columns), None
        )
        close_column = next(
            (columns[name] for name in self.close_column_candidates if name in columns), None
        )
        if date_column is None or close_column is None:
            raise DataProviderError(f"{path} must have a date column and a close column")

        try:
            index = pd.to_datetime(frame[date_column], utc=True)
        except (ValueError, TypeError) as exc:
            raise DataProviderError(f"{path} has an unparseable date: {exc}") from exc
        closes = pd.Series(
            pd.to_numeric(frame[close_column], errors="coerce").to_numpy(),
            index=index,
        )
        return closes.sort_index().dropna()


def _utc(value: datetime) -> pd.Timestamp:
    stamp = pd.Timestamp(value)
    if stamp.tzinfo is None:
        return stamp.tz_localize("UTC")
    return stamp.tz_convert("UTC")
