"""
Positional ("serial") kanji numbers, one character per decimal digit.

Used for years, phone numbers and the like in vertical text:

    一二三      → 123
    二〇〇      → 200
    一九八四    → 1984

Only the digits 〇 to 九 (and their daiji) are allowed; multipliers and
section words are an InvalidSequenceError.
"""

from __future__ import annotations

from .decoder import KANJI_BYTES, decode_kanji, to_bytes, unexpected_rune
from .exceptions import EmptyInputError, InvalidSequenceError, NumberOverflowError
from .magnitudes import MAX_INT64, MAX_UINT64, MIN_INT64, NEGATIVE_PREFIX, TEN
from .values import lookup

_NEGATIVE_PREFIX_BYTES = NEGATIVE_PREFIX.encode("ascii")
_SERIAL_DIGITS = "〇一二三四五六七八九"


def parse_serial_uint(text: str | bytes) -> int:
    """Return the unsigned 64-bit integer of a serial kanji number."""
    data = to_bytes(text)
    n = len(data)
    if n == 0:
        raise EmptyInputError()
    total = 0
    i = 0
    while i < n - 2:
        value, found = lookup(decode_kanji(data, i))
        if not found:
            raise unexpected_rune(data, i)
        if value >= TEN:
            raise InvalidSequenceError()
        total = total * TEN + value
        if total > MAX_UINT64:
            raise NumberOverflowError()
        i += KANJI_BYTES
    if i < n:
        raise unexpected_rune(data, i)
    return total


def parse_serial_int(text: str | bytes) -> int:
    """Return the signed 64-bit integer of a serial kanji number ("-" prefix allowed)."""
    data = to_bytes(text)
    is_negative = data.startswith(_NEGATIVE_PREFIX_BYTES)
    magnitude = parse_serial_uint(data[len(_NEGATIVE_PREFIX_BYTES) :] if is_negative else data)
    if is_negative:
        if magnitude > -MIN_INT64:
            raise NumberOverflowError()
        return -magnitude
    if magnitude > MAX_INT64:
        raise NumberOverflowError()
    return magnitude


def format_serial_uint(u: int) -> str:
    """Return an unsigned 64-bit integer as a serial kanji number."""
    if not 0 <= u <= MAX_UINT64:
        raise NumberOverflowError(details={"value": str(u)})
    return "".join(_SERIAL_DIGITS[int(digit)] for digit in str(u))


def format_serial_int(i: int) -> str:
    """Return a signed 64-bit integer as a serial kanji number."""
    if not MIN_INT64 <= i <= MAX_INT64:
        raise NumberOverflowError(details={"value": str(i)})
    text = "".join(_SERIAL_DIGITS[int(digit)] for digit in str(abs(i)))
    return NEGATIVE_PREFIX + text if i < 0 else text
