"""
Character-to-value lookup for every numeral that fits into 64 bits.

The table is a flat list indexed by a multiplicative hash of the code point.
The hash is only collision-free over the known vocabulary, so every slot
stores its owning code point and a lookup only succeeds when that code point
equals the query. Anything else, including forged code points produced by
the fast decoder, reports `found = False`.

The hash multiplier and table size are chosen once at import time by trying
multipliers until no two vocabulary characters share a slot.
"""

from __future__ import annotations

from .magnitudes import (
    CHO,
    EXTENDED_SECTION_STARTS,
    HUNDRED,
    KEI,
    MAN,
    MULTI_CHARACTER_CONTINUATIONS,
    OKU,
    TEN,
    THOUSAND,
    big_magnitudes,
)
from .models import DigitClass, Magnitude

# ─── Vocabulary ─────────────────────────────────────────────────────

STANDARD_NUMERALS: dict[str, int] = {
    "零": 0,
    "〇": 0,
    "一": 1,
    "二": 2,
    "三": 3,
    "四": 4,
    "五": 5,
    "六": 6,
    "七": 7,
    "八": 8,
    "九": 9,
    "十": TEN,
    "百": HUNDRED,
    "千": THOUSAND,
    "万": MAN,
    "億": OKU,
    "兆": CHO,
    "京": KEI,
}

# Daiji (大字) still used on bank notes and contracts.
DAIJI_NUMERALS: dict[str, int] = {
    "壱": 1,
    "弐": 2,
    "参": 3,
    "伍": 5,
    "拾": TEN,
    "萬": MAN,
}

# Obsolete daiji.
OBSOLETE_DAIJI_NUMERALS: dict[str, int] = {
    "壹": 1,
    "貳": 2,
    "貮": 2,
    "參": 3,
    "肆": 4,
    "陸": 6,
    "柒": 7,
    "漆": 7,
    "捌": 8,
    "玖": 9,
    "佰": HUNDRED,
    "阡": THOUSAND,
    "仟": THOUSAND,
}

VOCABULARY: dict[str, int] = {
    **STANDARD_NUMERALS,
    **DAIJI_NUMERALS,
    **OBSOLETE_DAIJI_NUMERALS,
}

ZERO_CHARACTERS: frozenset[str] = frozenset({"零", "〇"})


# ─── Perfect Hash ───────────────────────────────────────────────────

_MASK32 = 0xFFFF_FFFF
_GOLDEN = 2_654_435_761  # Knuth's multiplicative hashing constant
_EMPTY_SLOT = (-1, 0)


def _slot(code_point: int, multiplier: int, shift: int) -> int:
    return ((code_point * multiplier) & _MASK32) >> shift


def _build_table() -> tuple[int, int, list[tuple[int, int]]]:
    """Find a collision-free (multiplier, shift) and fill the slot list."""
    code_points = [ord(character) for character in VOCABULARY]
    for bits in range(8, 13):
        shift = 32 - bits
        for attempt in range(1, 4096):
            multiplier = ((attempt * _GOLDEN) & _MASK32) | 1
            slots = {_slot(cp, multiplier, shift) for cp in code_points}
            if len(slots) != len(code_points):
                continue
            table = [_EMPTY_SLOT] * (1 << bits)
            for character, value in VOCABULARY.items():
                table[_slot(ord(character), multiplier, shift)] = (ord(character), value)
            return multiplier, shift, table
    raise RuntimeError("no collision-free hash found for the numeral vocabulary")


_MULTIPLIER, _SHIFT, _TABLE = _build_table()


def lookup(code_point: int) -> tuple[int, bool]:
    """Value of a code point. Safe for forged code points from the fast decoder."""
    stored, value = _TABLE[((code_point * _MULTIPLIER) & _MASK32) >> _SHIFT]
    return value, stored == code_point


# ─── Public API ─────────────────────────────────────────────────────


def value_of(character: str) -> tuple[int, bool]:
    """Return the numeric value of a single kanji and whether it has one.

    Covers everything representable in 64 bits (up to 京) including daiji
    and obsolete daiji. Extended-section words (垓 and above) are not found.

    >>> value_of("壱")
    (1, True)
    >>> value_of("a")
    (0, False)
    """
    if len(character) != 1:
        return 0, False
    value, found = lookup(ord(character))
    return (value, True) if found else (0, False)


def digit_class_of(value: int) -> DigitClass:
    """Classify a numeral value into its grammatical role."""
    if value == 0:
        return DigitClass.ZERO
    if value < TEN:
        return DigitClass.UNIT
    if value < MAN:
        return DigitClass.SMALL_MULTIPLIER
    if value <= KEI:
        return DigitClass.SECTION
    return DigitClass.EXTENDED_SECTION


def magnitude_of(word: str) -> Magnitude | None:
    """Return the Magnitude of a single numeral or of a complete extended word.

    Unlike value_of this also knows 垓 through 無量大数:

    >>> magnitude_of("恒河沙").value == 10**52
    True
    """
    value, found = value_of(word)
    if found:
        return Magnitude(value, digit_class_of(value))
    if not word or word[0] not in EXTENDED_SECTION_STARTS:
        return None
    if word[1:] != MULTI_CHARACTER_CONTINUATIONS.get(word[0], ""):
        return None
    big_value = big_magnitudes().value_of(word[0])
    if big_value is None:
        return None
    return Magnitude(big_value, DigitClass.EXTENDED_SECTION)
