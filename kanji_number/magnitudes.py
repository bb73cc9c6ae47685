"""
Powers of ten used by the parsers and the formatter.

The 64-bit constants are plain module constants. The arbitrary-precision
table (京 = 10^16 up to 無量大数 = 10^68) is built on first use, exactly once
per process, and is read-only afterwards:

    table = big_magnitudes()
    table.value_of("恒")   # 10**52
    table.tiers[0]         # ("無量大数", 10**68)
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)

# ─── 64-bit Magnitudes ──────────────────────────────────────────────

TEN = 10
HUNDRED = 100
THOUSAND = 1_000
MAN = 10_000  # 万
OKU = 100_000_000  # 億
CHO = 1_000_000_000_000  # 兆
KEI = 10_000_000_000_000_000  # 京

MAX_UINT64 = (1 << 64) - 1
MAX_INT64 = (1 << 63) - 1
MIN_INT64 = -(1 << 63)

# Each extended tier groups four decimal digits, like 万.
MAX_BIGINT_MULTIPLIER = 9_999
# Exclusive upper bound of |value| for format_bigint.
BIGINT_LIMIT = 10**72

NEGATIVE_PREFIX = "-"

# ─── Extended-Section Words ─────────────────────────────────────────

# (word, exponent) from the largest tier down to 京.
_BIG_TIER_EXPONENTS: tuple[tuple[str, int], ...] = (
    ("無量大数", 68),
    ("不可思議", 64),
    ("那由他", 60),
    ("阿僧祇", 56),
    ("恒河沙", 52),
    ("極", 48),
    ("載", 44),
    ("正", 40),
    ("澗", 36),
    ("溝", 32),
    ("穣", 28),
    ("秭", 24),
    ("垓", 20),
    ("京", 16),
)

# First character of every extended-section word (10^20 and above). None of
# these fit into 64 bits.
EXTENDED_SECTION_STARTS: frozenset[str] = frozenset(
    word[0] for word, exponent in _BIG_TIER_EXPONENTS if exponent >= 20
)

# Characters that must follow the first character of a multi-character word.
MULTI_CHARACTER_CONTINUATIONS: Mapping[str, str] = MappingProxyType({
    word[0]: word[1:] for word, _ in _BIG_TIER_EXPONENTS if len(word) > 1
})


# ─── Arbitrary-Precision Table ──────────────────────────────────────


@dataclass(frozen=True)
class BigMagnitudeTable:
    """Read-only magnitudes for the arbitrary-precision path."""

    tiers: tuple[tuple[str, int], ...]  # (word, value), largest first
    by_first_character: Mapping[str, int]

    def value_of(self, character: str) -> int | None:
        """Return the value of an extended-section word given its first character."""
        return self.by_first_character.get(character)


class _OnceTable:
    """Builds the big magnitude table exactly once, even under concurrent first use."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._table: BigMagnitudeTable | None = None

    def get(self) -> BigMagnitudeTable:
        table = self._table
        if table is not None:
            return table
        with self._lock:
            if self._table is None:
                self._table = _build_big_magnitudes()
            return self._table


def _build_big_magnitudes() -> BigMagnitudeTable:
    tiers = tuple((word, TEN**exponent) for word, exponent in _BIG_TIER_EXPONENTS)
    logger.debug("Initialised %d arbitrary-precision magnitudes", len(tiers))
    return BigMagnitudeTable(
        tiers=tiers,
        by_first_character=MappingProxyType({word[0]: value for word, value in tiers}),
    )


_big_magnitudes = _OnceTable()


def big_magnitudes() -> BigMagnitudeTable:
    """Return the process-wide arbitrary-precision magnitude table."""
    return _big_magnitudes.get()
