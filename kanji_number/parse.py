"""
Parse kanji numerals into 64-bit integers.

Grammar, one character at a time:
  - unit (1-9)          held back until we know whether a multiplier follows
  - 十 / 百 / 千         multiply the held unit (or count as 1), each at most
                        once per segment and in decreasing order
  - 万 / 億 / 兆 / 京     close the segment (1..9999) and scale it, each tier at
                        most once and in decreasing order
  - 零 / 〇              only as the complete string
  - 垓 and above        can never fit into 64 bits → NumberOverflowError

Examples:
    "九百二十二京三千三百七十二兆三百六十八億五千四百七十七万五千八百七" → 2**63 - 1
    "壱万"                                                                → 10000
"""

from __future__ import annotations

from .decoder import KANJI_BYTES, decode_kanji, to_bytes, unexpected_rune
from .exceptions import EmptyInputError, InvalidSequenceError, NumberOverflowError
from .magnitudes import (
    EXTENDED_SECTION_STARTS,
    MAN,
    MAX_INT64,
    MAX_UINT64,
    MIN_INT64,
    NEGATIVE_PREFIX,
    TEN,
)
from .values import lookup

_NEGATIVE_PREFIX_BYTES = NEGATIVE_PREFIX.encode("ascii")
_EXTENDED_CODE_POINTS: frozenset[int] = frozenset(ord(c) for c in EXTENDED_SECTION_STARTS)


# ─── 64-bit Arithmetic ──────────────────────────────────────────────


def _mul64(a: int, b: int) -> tuple[int, int]:
    """Double-width multiply: returns the (high, low) 64-bit halves of a * b."""
    product = a * b
    return product >> 64, product & MAX_UINT64


def _add64(a: int, b: int) -> tuple[int, int]:
    """Carry-checked add: returns (sum mod 2**64, carry)."""
    total = a + b
    return total & MAX_UINT64, total >> 64


# ─── Public API ─────────────────────────────────────────────────────


def parse_int(text: str | bytes) -> int:
    """Return the signed 64-bit integer represented by the given numerals.

    A leading "-" negates the number.

    Raises:
        NumberOverflowError: If the value is outside [-2**63, 2**63 - 1].
        KanjiNumberError: Any other parse failure, see parse_uint().
    """
    data = to_bytes(text)
    is_negative = data.startswith(_NEGATIVE_PREFIX_BYTES)
    magnitude = parse_uint(data[len(_NEGATIVE_PREFIX_BYTES) :] if is_negative else data)
    if is_negative:
        if magnitude > -MIN_INT64:
            raise NumberOverflowError()
        return -magnitude
    if magnitude > MAX_INT64:
        raise NumberOverflowError()
    return magnitude


def parse_uint(text: str | bytes) -> int:
    """Return the unsigned 64-bit integer represented by the given numerals.

    Raises:
        EmptyInputError: The input is empty.
        InvalidSequenceError: Known characters in a forbidden order.
        NumberOverflowError: The value needs more than 64 bits.
        UnexpectedRuneError: A character that is not a numeral.
        EncodingError: The input is not valid UTF-8.
    """
    data = to_bytes(text)
    n = len(data)
    if n == 0:
        raise EmptyInputError()

    total = 0
    segment = 0
    last_value = 0
    min_segment_value = MAX_UINT64  # smallest multiplier seen in this segment
    min_segment_end = MAX_UINT64  # smallest section word seen so far
    i = 0
    while i < n - 2:
        code_point = decode_kanji(data, i)
        value, found = lookup(code_point)
        if found and value > 0:
            if value < TEN:
                # two bare units in a row, e.g. 一二
                if 0 < last_value < TEN:
                    raise InvalidSequenceError()
                last_value = value
            elif value < MAN:
                if value >= min_segment_value:
                    raise InvalidSequenceError()
                min_segment_value = value
                if 0 < last_value < TEN:
                    segment += last_value * value
                else:
                    segment += value
                last_value = value
            else:
                if value >= min_segment_end:
                    raise InvalidSequenceError()
                min_segment_end = value
                if 0 < last_value < TEN:
                    segment += last_value
                if segment == 0 or segment >= MAN:
                    raise InvalidSequenceError()
                high, product = _mul64(segment, value)
                total, carry = _add64(total, product)
                if carry or high:
                    raise NumberOverflowError()
                min_segment_value = MAX_UINT64
                segment = 0
                last_value = 0
        elif found:
            # zero is only valid if it is the only character
            if i == 0:
                i += KANJI_BYTES
                break
            raise InvalidSequenceError()
        elif code_point in _EXTENDED_CODE_POINTS:
            raise NumberOverflowError()
        else:
            raise unexpected_rune(data, i)
        i += KANJI_BYTES

    # leftovers: anything after a leading zero or a trailing non-kanji byte
    if i < n:
        raise unexpected_rune(data, i)

    if 0 < last_value < TEN:
        segment += last_value
    if segment > 0:
        total, carry = _add64(total, segment)
        if carry:
            raise NumberOverflowError()
    return total
