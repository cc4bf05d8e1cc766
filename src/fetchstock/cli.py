"""Command-line interface for the closing price report."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from fetchstock.config import DATA_SOURCES, Settings, parse_datetime, parse_symbols
from fetchstock.runtime import run

BANNER = r"""
   __      _       _         _             _
  / _| ___| |_ ___| |__  ___| |_ ___   ___| | __
 | |_ / _ \ __/ __| '_ \/ __| __/ _ \ / __| |/ /
 |  _|  __/ || (__| | | \__ \ || (_) | (__|   <
 |_|  \___|\__\___|_| |_|___/\__\___/ \___|_|\_\

   daily closing price signals
"""


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(
        prog="fetchstock",
        description="Print closing price signals for ticker symbols as CSV",
    )
    parser.add_argument("-s", "--symbols", type=str, help="Comma-separated symbols")
    parser.add_argument(
        "-f",
        "--from",
        dest="period_start",
        type=str,
        help="Period start, RFC 3339 timestamp or YYYY-MM-DD",
    )
    parser.add_argument(
        "--to",
        dest="period_end",
        type=str,
        help="Period end, RFC 3339 timestamp or YYYY-MM-DD (default: now)",
    )
    parser.add_argument("--window", type=int, help="Moving average window in days")
    parser.add_argument("--data-source", choices=sorted(DATA_SOURCES), help="Data source")
    parser.add_argument("--historical-dir", type=str, help="CSV historical data directory")
    parser.add_argument("--workers", type=int, help="Symbols fetched in parallel")
    parser.add_argument("--log-level", type=str, help="Logging level (DEBUG, INFO, ...)")
    parser.add_argument(
        "--no-banner",
        action="store_true",
        help="Do not print the banner before the report",
    )
    return parser


def apply_cli_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Apply CLI values onto environment-derived settings."""
    overrides: dict[str, object] = {}
    if args.symbols:
        overrides["symbols"] = parse_symbols(args.symbols, settings.symbols)
    if args.period_start:
        overrides["period_start"] = parse_datetime(args.period_start, field_name="--from")
    if args.period_end:
        overrides["period_end"] = parse_datetime(args.period_end, field_name="--to")
    if args.window is not None:
        overrides["sma_window"] = args.window
    if args.data_source:
        overrides["data_source"] = args.data_source
    if args.historical_dir:
        overrides["historical_data_dir"] = args.historical_dir
    if args.workers is not None:
        overrides["workers"] = args.workers
    if args.log_level:
        overrides["log_level"] = args.log_level.strip().upper()
    if args.no_banner:
        overrides["show_banner"] = False

    merged = settings.with_overrides(**overrides)
    if merged.period_start is None:
        raise ValueError("--from is required (or set FROM)")
    return merged


def print_banner(stream: TextIO) -> None:
    """Print the banner in blue when writing to a terminal."""
    if not stream.isatty():
        return
    print(f"\033[34m{BANNER}\033[0m", file=stream)


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = apply_cli_overrides(Settings.from_env(), args)
    except ValueError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    if settings.show_banner:
        print_banner(sys.stdout)
    return run(settings)


if __name__ == "__main__":
    sys.exit(main())
