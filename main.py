#!/usr/bin/env python3
"""
Kanji Number: Entry Point
=========================

Converts each argument: Arabic integers are formatted as kanji numerals,
anything else is parsed as kanji numerals. Without arguments a demo table
is printed.

Usage:
    python main.py                          # Demo table
    python main.py 12345 一万二千三百四十五    # Convert both ways
    python main.py 一恒                      # Shows the parse error
"""

from __future__ import annotations

import logging
import os
import re
import sys

from kanji_number import KanjiNumberError, format_bigint, parse_bigint, to_daiji

# ─── Load .env if available (optional dependency) ────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


# ─── Demo Values ─────────────────────────────────────────────────────

DEMO_VALUES = [
    0,
    10,
    1_000,
    10_000,
    12_345,
    2**63 - 1,
    -(2**63),
    2**64 - 1,
    10**20,
    9_999 * 10**68,
]

DEMO_TEXTS = [
    "壱万",
    "一一",
    "〇一",
    "一恒",
    "一恒一",
]

_ARABIC = re.compile(r"-?\d+")


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Conversion ──────────────────────────────────────────────────────


def convert(arg: str) -> bool:
    """Print the conversion of one argument. Returns False if it failed."""
    try:
        if _ARABIC.fullmatch(arg):
            text = format_bigint(int(arg))
            print(f"  {arg} {_DIM}→{_RESET} {_BOLD}{text}{_RESET}  {_DIM}({to_daiji(text)}){_RESET}")
        else:
            value = parse_bigint(arg)
            print(f"  {arg} {_DIM}→{_RESET} {_BOLD}{value}{_RESET}")
    except KanjiNumberError as e:
        print(f"  {arg} {_DIM}→{_RESET} {_RED}[{e.code}]{_RESET} {e}")
        return False
    return True


def run_demo() -> None:
    """Print a table of formatting and parsing examples."""
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  KANJI NUMBER DEMO{_RESET}")
    print(f"{'=' * _WIDTH}")
    for value in DEMO_VALUES:
        convert(str(value))
    print(f"{'─' * _WIDTH}")
    for text in DEMO_TEXTS:
        convert(text)
    print(f"{'=' * _WIDTH}\n")


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Convert the command-line arguments, or run the demo without any."""
    logging.basicConfig(level=os.environ.get("KANJI_NUMBER_LOG_LEVEL", "WARNING").upper())
    args = sys.argv[1:] if argv is None else argv
    if not args:
        run_demo()
        return 0

    ok = True
    for arg in args:
        ok = convert(arg) and ok
    if ok:
        print(f"  {_GREEN}done{_RESET}")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
