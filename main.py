#!/usr/bin/env python3
"""
Amount Converter — Command Line
===============================

Converts each amount given on the command line and prints the result.

Usage:
    python main.py '$100000'                    # → 1500万円 (rate from env, default 150)
    python main.py 100000円 --rate 110 --commas # → $909.09
    python main.py 12345 1.23万 5km             # several at once

Environment (or .env):
    AMOUNT_CONVERTER_RATE, AMOUNT_CONVERTER_LARGE_UNITS, AMOUNT_CONVERTER_LOG_LEVEL
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from amount_converter.config import Settings, load_settings
from amount_converter.converter import AmountConverter
from amount_converter.exceptions import AmountConversionError

# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Argument Parsing ───────────────────────────────────────────────


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert dollars ⇄ yen, metric ⇄ imperial, and commas ⇄ 万/億.",
    )
    parser.add_argument("amounts", nargs="+", metavar="AMOUNT", help="e.g. '$100', 100円, 5km, 12345")
    parser.add_argument(
        "--rate",
        type=float,
        default=settings.default_rate,
        help=f"yen per dollar (default: {settings.default_rate:g})",
    )
    style = parser.add_mutually_exclusive_group()
    style.add_argument(
        "--large-units",
        dest="use_large_units",
        action="store_true",
        default=settings.use_large_units,
        help="format results with 万/億 words",
    )
    style.add_argument(
        "--commas",
        dest="use_large_units",
        action="store_false",
        help="format results with comma grouping",
    )
    return parser


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_results(converter: AmountConverter, amounts: list[str], rate: float, use_large_units: bool) -> int:
    """Convert and print every amount.

    Returns:
        0 if every amount converted, 1 if any failed.
    """
    style = "万/億" if use_large_units else "commas"
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  AMOUNT CONVERTER{_RESET}   {_DIM}rate {rate:g} ¥/$ · {style}{_RESET}")
    print(f"{'─' * _WIDTH}")

    failures = 0
    for amount in amounts:
        try:
            result = converter.convert(amount, rate, use_large_units)
        except AmountConversionError as e:
            failures += 1
            print(f"  {amount:<20} {_RED}[{e.code}]{_RESET} {e}")
            continue
        print(f"  {amount:<20} {_DIM}→{_RESET} {_GREEN}{_BOLD}{result}{_RESET}")

    print(f"{'=' * _WIDTH}\n")
    return 1 if failures else 0


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    args = build_parser(settings).parse_args(argv)
    return print_results(AmountConverter(), args.amounts, args.rate, args.use_large_units)


if __name__ == "__main__":
    sys.exit(main())
