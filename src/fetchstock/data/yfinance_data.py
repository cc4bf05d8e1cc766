"""Yahoo Finance closing price provider."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any

import pandas as pd

from fetchstock.errors import DataProviderError


class YFinanceDataProvider:
    """Fetch daily closing prices from Yahoo Finance via yfinance."""

    interval = "1d"

    def get_closes(self, symbol: str, start: datetime, end: datetime) -> list[float]:
        try:
            import yfinance as yf
        except ImportError as exc:
            raise DataProviderError(
                "yfinance is required for Yahoo Finance data. "
                "Install it with `pip install yfinance`."
            ) from exc

        ticker = self._resolve_yfinance_symbol(symbol)
        try:
            history = yf.Ticker(ticker).history(
                start=start,
                end=end,
                interval=self.interval,
                auto_adjust=False,
                actions=False,
            )
        except Exception as exc:
            raise DataProviderError(
                f"yfinance request failed for {symbol} ({ticker}): {exc}"
            ) from exc

        closes = self._normalize_history(history, symbol, ticker)
        return [float(value) for value in closes]

    @staticmethod
    def _normalize_history(history: Any, symbol: str, ticker: str) -> pd.Series:
        if history is None:
            return pd.Series(dtype="float64")
        frame = pd.DataFrame(history).copy()
        if frame.empty:
            return pd.Series(dtype="float64")

        close_column = YFinanceDataProvider._pick_column(frame, "adj_close")
        if close_column is None:
            close_column = YFinanceDataProvider._pick_column(frame, "close")
        if close_column is None:
            raise DataProviderError(
                f"yfinance payload missing close column for {symbol} ({ticker})"
            )

        try:
            index = pd.to_datetime(frame.index, utc=True)
        except (ValueError, TypeError) as exc:
            raise DataProviderError(
                f"yfinance payload has unparseable timestamps for {symbol} ({ticker}): {exc}"
            ) from exc
        closes = pd.Series(
            pd.to_numeric(frame[close_column], errors="coerce").to_numpy(),
            index=index,
        )
        return closes.sort_index().dropna()

    @staticmethod
    def _pick_column(frame: pd.DataFrame, field: str) -> Any | None:
        for column in frame.columns:
            key = YFinanceDataProvider._column_key(column)
            if key == field or key.startswith(f"{field}_"):
                return column
        return None

    @staticmethod
    def _column_key(value: Any) -> str:
        if isinstance(value, tuple):
            text = "_".join(str(part) for part in value if part is not None)
        else:
            text = str(value)
        return re.sub(r"[^a-zA-Z0-9]+", "_", text).strip("_").lower()

    @staticmethod
    def _resolve_yfinance_symbol(symbol: str) -> str:
        compact = symbol.strip().upper().replace("/", "").replace("-", "")
        if YFinanceDataProvider._looks_like_crypto_symbol(compact):
            for quote in ("USDT", "USD"):
                if compact.endswith(quote):
                    return f"{compact[: -len(quote)]}-USD"
        return symbol.strip().upper()

    @staticmethod
    def _looks_like_crypto_symbol(symbol: str) -> bool:
        if symbol.endswith("USDT") and len(symbol) >= 7:
            return True
        if symbol.endswith("USD") and len(symbol) >= 6:
            return True
        return False
