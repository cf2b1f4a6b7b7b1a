"""
Command-line entry point.

Usage:
    statediff-tokens                          # scan the built-in (empty) input
    statediff-tokens --changes changes.jsonl  # scan changes from a JSON-lines file
"""
from __future__ import annotations

import argparse
import logging
import sys

from .models import NameSymbolPair
from .scanner import find_name_symbol_pair
from .sources import JsonLinesChangeSource, StaticChangeSource, StorageChangeSource

DEFAULT_LOG_LEVEL = "WARNING"


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def format_result(pair: NameSymbolPair | None) -> str:
    if pair is None:
        return "No matching name-symbol pair found."
    return f"Found name: '{pair.name}', symbol: '{pair.symbol}'"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="statediff-tokens",
        description="Look for an adjacent token name/symbol pair in storage changes",
    )
    p.add_argument("--changes", default=None, help="JSON-lines file of storage changes (default: empty input)")
    p.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
    )
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    source: StorageChangeSource
    if args.changes is not None:
        source = JsonLinesChangeSource(args.changes)
    else:
        source = StaticChangeSource()

    try:
        changes = source.fetch_changes()
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(format_result(find_name_symbol_pair(changes)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
