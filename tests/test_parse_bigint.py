"""
Tests for the arbitrary-precision parser (parse_bigint).
"""

from __future__ import annotations

import pytest

from kanji_number import (
    EmptyInputError,
    EncodingError,
    InvalidSequenceError,
    UnexpectedEOFError,
    UnexpectedRuneError,
    parse_bigint,
)

from cases import BANK_NOTE_CASES, COMMON_CASES, GRAMMAR_ERRORS, MAX_UINT64_TEXT, OBSOLETE_DAIJI_CASES

KEI = 10**16

EXTENDED_TIERS: list[tuple[str, int]] = [
    ("垓", 20),
    ("秭", 24),
    ("穣", 28),
    ("溝", 32),
    ("澗", 36),
    ("正", 40),
    ("載", 44),
    ("極", 48),
    ("恒河沙", 52),
    ("阿僧祇", 56),
    ("那由他", 60),
    ("不可思議", 64),
    ("無量大数", 68),
]

MULTI_CHARACTER_WORDS = ["恒河沙", "阿僧祇", "那由他", "不可思議", "無量大数"]


# ═══════════════════════════════════════════════════════════════════════
# VALID INPUT
# ═══════════════════════════════════════════════════════════════════════


class TestParseBigIntPrimitiveCases:
    """Everything the 64-bit parser accepts must give the same value here."""

    @pytest.mark.parametrize(("text", "expected"), COMMON_CASES + BANK_NOTE_CASES + OBSOLETE_DAIJI_CASES)
    def test_same_as_fixed_width(self, text, expected):
        assert parse_bigint(text) == expected

    def test_max_uint64(self):
        assert parse_bigint(MAX_UINT64_TEXT) == 2**64 - 1

    def test_beyond_uint64(self):
        assert parse_bigint(MAX_UINT64_TEXT[:-1] + "六") == 2**64


class TestParseBigIntExtendedTiers:
    @pytest.mark.parametrize(("word", "exponent"), EXTENDED_TIERS)
    def test_one(self, word, exponent):
        assert parse_bigint("一" + word) == 10**exponent

    @pytest.mark.parametrize(("word", "exponent"), EXTENDED_TIERS)
    def test_two(self, word, exponent):
        assert parse_bigint("二" + word) == 2 * 10**exponent

    @pytest.mark.parametrize(("word", "exponent"), EXTENDED_TIERS)
    def test_with_trailing_unit(self, word, exponent):
        assert parse_bigint("二" + word + "二") == 2 * 10**exponent + 2

    def test_one_gai_literal(self):
        assert parse_bigint("一垓") == 100_000_000_000_000_000_000

    def test_mixed_tiers(self):
        assert parse_bigint("二無量大数一京二") == 2 * 10**68 + KEI + 2

    def test_man_below_extended(self):
        assert parse_bigint("二無量大数一万二千三百四十五") == 2 * 10**68 + 12_345

    def test_largest_multiplier(self):
        assert parse_bigint("九千九百九十九無量大数") == 9_999 * 10**68

    def test_every_tier(self):
        text = "一無量大数二不可思議三那由他四阿僧祇五恒河沙六極七載八正九澗十溝十一穣十二秭十三垓十四京"
        expected = (
            10**68 + 2 * 10**64 + 3 * 10**60 + 4 * 10**56 + 5 * 10**52 + 6 * 10**48
            + 7 * 10**44 + 8 * 10**40 + 9 * 10**36 + 10 * 10**32 + 11 * 10**28
            + 12 * 10**24 + 13 * 10**20 + 14 * KEI
        )
        assert parse_bigint(text) == expected

    def test_negative(self):
        assert parse_bigint("-一垓") == -(10**20)

    def test_daiji_multiplier(self):
        assert parse_bigint("弐拾垓") == 20 * 10**20


# ═══════════════════════════════════════════════════════════════════════
# ERRORS
# ═══════════════════════════════════════════════════════════════════════


class TestParseBigIntErrors:
    def test_empty(self):
        with pytest.raises(EmptyInputError):
            parse_bigint("")

    def test_sign_only(self):
        with pytest.raises(EmptyInputError):
            parse_bigint("-")

    @pytest.mark.parametrize("text", GRAMMAR_ERRORS)
    def test_invalid_sequence(self, text):
        with pytest.raises(InvalidSequenceError):
            parse_bigint(text)

    @pytest.mark.parametrize("text", ["一垓二垓", "一垓一秭", "垓", "恒河沙", "一万垓"])
    def test_invalid_extended_sequence(self, text):
        with pytest.raises(InvalidSequenceError):
            parse_bigint(text)

    def test_digit_after_leading_zero(self):
        with pytest.raises(UnexpectedRuneError) as excinfo:
            parse_bigint("〇一")
        assert excinfo.value.actual == "一"

    @pytest.mark.parametrize("text", ["\ufffd", "一\ufffd", "一恒\ufffd"])
    def test_encoding(self, text):
        with pytest.raises(EncodingError):
            parse_bigint(text)

    def test_truncated_word_eof(self):
        with pytest.raises(UnexpectedEOFError):
            parse_bigint("一恒")

    def test_wrong_continuation(self):
        with pytest.raises(UnexpectedRuneError) as excinfo:
            parse_bigint("一恒一")
        assert excinfo.value.actual == "一"
        assert excinfo.value.expected == "河"

    def test_ascii_after_word_start(self):
        with pytest.raises(UnexpectedRuneError) as excinfo:
            parse_bigint("一恒a")
        assert excinfo.value.actual == "a"

    @pytest.mark.parametrize("word", MULTI_CHARACTER_WORDS)
    def test_every_prefix_is_eof(self, word):
        for end in range(1, len(word)):
            with pytest.raises(UnexpectedEOFError):
                parse_bigint("一" + word[:end])

    @pytest.mark.parametrize("word", MULTI_CHARACTER_WORDS)
    def test_every_prefix_with_wrong_continuation(self, word):
        for end in range(1, len(word)):
            with pytest.raises(UnexpectedRuneError) as excinfo:
                parse_bigint("一" + word[:end] + "一")
            assert excinfo.value.expected == word[end]
