from __future__ import annotations

import sys
from datetime import UTC, datetime
from types import SimpleNamespace

import pandas as pd
import pytest

from fetchstock.data.yfinance_data import YFinanceDataProvider
from fetchstock.errors import DataProviderError

START = datetime(2025, 1, 1, tzinfo=UTC)
END = datetime(2025, 2, 1, tzinfo=UTC)


def _install_fake_yfinance(
    monkeypatch: pytest.MonkeyPatch, history: object, captured: dict
) -> None:
    class FakeTicker:
        def __init__(self, ticker: str) -> None:
            captured["ticker"] = ticker

        def history(self, **kwargs: object) -> object:
            captured["kwargs"] = kwargs
            return history

    monkeypatch.setitem(sys.modules, "yfinance", SimpleNamespace(Ticker=FakeTicker))


def test_yfinance_symbol_mapping_supports_stocks_and_crypto() -> None:
    assert YFinanceDataProvider._resolve_yfinance_symbol("aapl") == "AAPL"
    assert YFinanceDataProvider._resolve_yfinance_symbol("BRK-B") == "BRK-B"
    assert YFinanceDataProvider._resolve_yfinance_symbol("BTCUSD") == "BTC-USD"
    assert YFinanceDataProvider._resolve_yfinance_symbol("ETH/USDT") == "ETH-USD"


def test_yfinance_provider_returns_sorted_adjusted_closes(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict = {}
    history = pd.DataFrame(
        {
            "Open": [11.0, 10.0, 12.0],
            "Close": [11.5, 10.5, 12.5],
            "Adj Close": [11.4, 10.4, 12.4],
        },
        index=pd.to_datetime(["2025-01-03", "2025-01-02", "2025-01-06"]),
    )
    _install_fake_yfinance(monkeypatch, history, captured)

    closes = YFinanceDataProvider().get_closes("aapl", START, END)

    assert closes == [10.4, 11.4, 12.4]
    assert captured["ticker"] == "AAPL"
    assert captured["kwargs"]["start"] == START
    assert captured["kwargs"]["end"] == END
    assert captured["kwargs"]["interval"] == "1d"


def test_yfinance_provider_falls_back_to_close_and_drops_missing(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    history = pd.DataFrame(
        {"Close": [10.5, None, "11.5"]},
        index=[
            "2025-01-02T09:30:00-05:00",
            "2025-01-03T09:30:00-05:00",
            "2025-07-02T09:30:00-04:00",
        ],
    )
    _install_fake_yfinance(monkeypatch, history, {})

    closes = YFinanceDataProvider().get_closes("SPY", START, END)

    assert closes == [10.5, 11.5]


def test_yfinance_provider_returns_empty_list_without_rows(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_fake_yfinance(monkeypatch, pd.DataFrame(), {})

    assert YFinanceDataProvider().get_closes("SPY", START, END) == []


def test_yfinance_provider_wraps_request_failures(monkeypatch: pytest.MonkeyPatch) -> None:
    class FailingTicker:
        def __init__(self, _ticker: str) -> None:
            return None

        def history(self, **_kwargs: object) -> pd.DataFrame:
            raise RuntimeError("connection reset")

    monkeypatch.setitem(sys.modules, "yfinance", SimpleNamespace(Ticker=FailingTicker))

    with pytest.raises(DataProviderError, match="connection reset"):
        YFinanceDataProvider().get_closes("SPY", START, END)


def test_yfinance_provider_rejects_payload_without_close(monkeypatch: pytest.MonkeyPatch) -> None:
    history = pd.DataFrame({"Open": [1.0]}, index=pd.to_datetime(["2025-01-02"]))
    _install_fake_yfinance(monkeypatch, history, {})

    with pytest.raises(DataProviderError, match="missing close column"):
        YFinanceDataProvider().get_closes("SPY", START, END)


def test_yfinance_provider_rejects_unparseable_timestamps(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    history = pd.DataFrame({"Close": [1.0, 2.0]}, index=["not-a-date", "2025-01-03"])
    _install_fake_yfinance(monkeypatch, history, {})

    with pytest.raises(DataProviderError, match="unparseable timestamps"):
        YFinanceDataProvider().get_closes("SPY", START, END)
