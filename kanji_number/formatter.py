"""
Format integers as canonical kanji numerals (the inverse of the parsers).

Digits are extracted greedily from the largest tier downwards. A multiplier
of one is written as 一 in front of 万 and larger tiers but omitted in front
of 千, 百 and 十:

    10_000         → 一万
    1_000          → 千
    2**64 - 1      → 千八百四十四京六千七百四十四兆七百三十七億九百五十五万千六百十五
"""

from __future__ import annotations

from .exceptions import NumberOverflowError
from .magnitudes import (
    BIGINT_LIMIT,
    CHO,
    HUNDRED,
    KEI,
    MAN,
    MAX_BIGINT_MULTIPLIER,
    MAX_INT64,
    MAX_UINT64,
    MIN_INT64,
    NEGATIVE_PREFIX,
    OKU,
    THOUSAND,
    big_magnitudes,
)

PREFERRED_ZERO = "〇"
_DIGITS = (PREFERRED_ZERO, "一", "二", "三", "四", "五", "六", "七", "八", "九")

# Tiers above 百 handled by the 64-bit formatter, largest first.
_FIXED_TIERS: tuple[tuple[str, int], ...] = (
    ("京", KEI),
    ("兆", CHO),
    ("億", OKU),
    ("万", MAN),
    ("千", THOUSAND),
)


def _small(i: int) -> str:
    if i < 10:
        return _DIGITS[i]
    if i == HUNDRED:
        return "百"
    tens, ones = divmod(i, 10)
    prefix = "十" if tens == 1 else _DIGITS[tens] + "十"
    return prefix if ones == 0 else prefix + _DIGITS[ones]


# 〇 .. 百, the most frequently formatted values.
NUMBER_OF_FAST_SMALLS = 101
_SMALL_INTS: tuple[str, ...] = tuple(_small(i) for i in range(NUMBER_OF_FAST_SMALLS))


# ─── Public API ─────────────────────────────────────────────────────


def format_int(i: int) -> str:
    """Return a signed 64-bit integer as kanji numerals, "-" prefixed if negative.

    Raises:
        NumberOverflowError: If i is outside [-2**63, 2**63 - 1].
    """
    if not MIN_INT64 <= i <= MAX_INT64:
        raise NumberOverflowError(details={"value": str(i)})
    if 0 <= i < NUMBER_OF_FAST_SMALLS:
        return _SMALL_INTS[i]
    result: list[str] = []
    if i < 0:
        result.append(NEGATIVE_PREFIX)
    _format_unsigned(result, abs(i))
    return "".join(result)


def format_uint(u: int) -> str:
    """Return an unsigned 64-bit integer as kanji numerals.

    Raises:
        NumberOverflowError: If u is negative or not below 2**64.
    """
    if not 0 <= u <= MAX_UINT64:
        raise NumberOverflowError(details={"value": str(u)})
    if u < NUMBER_OF_FAST_SMALLS:
        return _SMALL_INTS[u]
    result: list[str] = []
    _format_unsigned(result, u)
    return "".join(result)


def format_bigint(i: int) -> str:
    """Return an integer of arbitrary size as kanji numerals.

    Supports only |i| < 10**72 (9999 of the 無量大数 tier).

    Raises:
        NumberOverflowError: If |i| >= 10**72.
    """
    u = abs(i)
    if u >= BIGINT_LIMIT:
        raise NumberOverflowError(details={"value": str(i)})
    if u <= MAX_UINT64:
        text = format_uint(u)
        return NEGATIVE_PREFIX + text if i < 0 else text
    result: list[str] = []
    if i < 0:
        result.append(NEGATIVE_PREFIX)
    for kanji, kanji_value in big_magnitudes().tiers:
        if u >= kanji_value:
            u = _append_big_tier(result, u, kanji, kanji_value)
    _format_unsigned(result, u)
    return "".join(result)


# ─── Helpers ────────────────────────────────────────────────────────


def _format_unsigned(result: list[str], u: int) -> None:
    for kanji, kanji_value in _FIXED_TIERS:
        if u >= kanji_value:
            u = _append_tier(result, u, kanji, kanji_value, u // kanji_value)
    if u > HUNDRED:
        u = _append_tier(result, u, "百", HUNDRED, u // HUNDRED)
    if u > 0:
        result.append(_SMALL_INTS[u])


def _append_multiplier(result: list[str], multiplier: int) -> None:
    """Write a multiplier below 万 in front of a tier word."""
    if multiplier < NUMBER_OF_FAST_SMALLS:
        result.append(_SMALL_INTS[multiplier])
        return
    if multiplier >= THOUSAND:
        multiplier = _append_tier(result, multiplier, "千", THOUSAND, multiplier // THOUSAND)
    if multiplier > HUNDRED:
        multiplier = _append_tier(result, multiplier, "百", HUNDRED, multiplier // HUNDRED)
    if multiplier > 0:
        result.append(_SMALL_INTS[multiplier])


def _append_tier(
    result: list[str], u: int, kanji: str, kanji_value: int, multiplier: int
) -> int:
    """Append `multiplier` and the tier word, return what is left of u."""
    total_value = multiplier * kanji_value
    if multiplier == 1:
        if kanji_value >= MAN:
            result.append("一")
    else:
        _append_multiplier(result, multiplier)
    result.append(kanji)
    return u - total_value


def _append_big_tier(result: list[str], u: int, kanji: str, kanji_value: int) -> int:
    multiplier, remainder = divmod(u, kanji_value)
    _append_multiplier(result, min(multiplier, MAX_BIGINT_MULTIPLIER))
    result.append(kanji)
    return remainder
