"""Environment and CLI runtime configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Self

from dotenv import load_dotenv

DEFAULT_SYMBOLS = ["AAPL", "MSFT", "UBER", "GOOG"]
DATA_SOURCES = {"yfinance", "csv"}


def parse_bool(value: str | None, default: bool) -> bool:
    """Parse truthy environment strings."""
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def parse_positive_int(value: str | None, default: int, *, field_name: str) -> int:
    """Parse a positive integer from an env string, falling back to default."""
    if value is None or not value.strip():
        return default
    try:
        parsed = int(value.strip())
    except ValueError as exc:
        raise ValueError(f"{field_name} must be an integer, got {value!r}") from exc
    if parsed <= 0:
        raise ValueError(f"{field_name} must be positive")
    return parsed


def parse_symbols(value: str | None, default: list[str] | None = None) -> list[str]:
    """Parse comma-separated symbols, dropping blanks and duplicates."""
    fallback = default or DEFAULT_SYMBOLS
    if not value:
        return list(fallback)
    symbols: list[str] = []
    for item in value.split(","):
        symbol = item.strip().upper()
        if symbol and symbol not in symbols:
            symbols.append(symbol)
    return symbols or list(fallback)


def parse_datetime(value: str | None, *, field_name: str) -> datetime | None:
    """Parse an RFC 3339 timestamp or a plain date into an aware UTC datetime.

    ``2020-07-02T19:30:00Z``, ``2020-07-02T15:30:00-04:00`` and ``2020-07-02`` are
    all accepted. Values without an offset are taken as UTC.
    """
    if value is None:
        return None
    text = value.strip()
    if not text:
        return None
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError as exc:
        raise ValueError(f"Couldn't parse {field_name} date {value!r}") from exc
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


@dataclass(frozen=True)
class Settings:
    """Immutable runtime settings."""

    symbols: list[str] = field(default_factory=lambda: list(DEFAULT_SYMBOLS))
    period_start: datetime | None = None
    period_end: datetime | None = None
    sma_window: int = 30
    data_source: str = "yfinance"
    historical_data_dir: str = "historical_data"
    workers: int = 1
    log_level: str = "INFO"
    show_banner: bool = True

    @classmethod
    def from_env(cls) -> Self:
        """Create settings from environment variables."""
        load_dotenv()
        raw = cls(
            symbols=parse_symbols(os.getenv("SYMBOLS")),
            period_start=parse_datetime(os.getenv("FROM"), field_name="FROM"),
            period_end=parse_datetime(os.getenv("TO"), field_name="TO"),
            sma_window=parse_positive_int(
                os.getenv("SMA_WINDOW"), 30, field_name="sma_window"
            ),
            data_source=str(os.getenv("DATA_SOURCE", "yfinance")).strip().lower(),
            historical_data_dir=str(os.getenv("HISTORICAL_DATA_DIR", "historical_data")).strip(),
            workers=parse_positive_int(os.getenv("WORKERS"), 1, field_name="workers"),
            log_level=str(os.getenv("LOG_LEVEL", "INFO")).strip().upper(),
            show_banner=parse_bool(os.getenv("SHOW_BANNER"), True),
        )
        return raw.validate()

    def with_overrides(self, **kwargs: object) -> Self:
        """Return a new settings object with updated values."""
        updated = replace(self, **kwargs)
        return updated.validate()

    def resolved_period_end(self, now: datetime | None = None) -> datetime:
        """Return the end of the period, defaulting to the current UTC time."""
        if self.period_end is not None:
            return self.period_end
        return now or datetime.now(UTC)

    def validate(self) -> Self:
        """Validate settings fields."""
        if not self.symbols:
            raise ValueError("at least one symbol is required")
        if self.sma_window <= 0:
            raise ValueError("sma_window must be positive")
        if self.workers <= 0:
            raise ValueError("workers must be positive")
        if self.data_source not in DATA_SOURCES:
            supported = ", ".join(sorted(DATA_SOURCES))
            raise ValueError(f"data_source must be one of {supported}")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level '{self.log_level}'")
        return self
