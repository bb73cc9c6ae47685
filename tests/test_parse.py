"""
Tests for the 64-bit parsers (parse_int, parse_uint).

Run: pytest tests/ -v
"""

from __future__ import annotations

import pytest

from kanji_number import (
    EmptyInputError,
    EncodingError,
    InvalidSequenceError,
    KanjiNumberError,
    NumberOverflowError,
    UnexpectedRuneError,
    parse_int,
    parse_uint,
)

from cases import (
    BANK_NOTE_CASES,
    COMMON_CASES,
    GRAMMAR_ERRORS,
    MAX_INT64_TEXT,
    MAX_UINT64_TEXT,
    MIN_INT64_TEXT,
    OBSOLETE_DAIJI_CASES,
)


# ═══════════════════════════════════════════════════════════════════════
# VALID INPUT
# ═══════════════════════════════════════════════════════════════════════


class TestParseValid:
    @pytest.mark.parametrize(("text", "expected"), COMMON_CASES)
    def test_parse_int(self, text, expected):
        assert parse_int(text) == expected

    @pytest.mark.parametrize(("text", "expected"), COMMON_CASES)
    def test_parse_uint(self, text, expected):
        assert parse_uint(text) == expected

    @pytest.mark.parametrize(("text", "expected"), BANK_NOTE_CASES)
    def test_bank_notes(self, text, expected):
        assert parse_uint(text) == expected

    @pytest.mark.parametrize(("text", "expected"), OBSOLETE_DAIJI_CASES)
    def test_obsolete_daiji(self, text, expected):
        assert parse_uint(text) == expected

    def test_daiji_equivalence(self):
        assert parse_uint("壱万") == parse_uint("一万") == 10_000

    def test_accepts_bytes(self):
        assert parse_uint("一万二千".encode("utf-8")) == 12_000

    def test_negative(self):
        assert parse_int("-二十三") == -23

    def test_negative_zero(self):
        assert parse_int("-〇") == 0


# ═══════════════════════════════════════════════════════════════════════
# BOUNDARIES
# ═══════════════════════════════════════════════════════════════════════


class TestBoundaries:
    def test_max_int64(self):
        assert parse_int(MAX_INT64_TEXT) == 2**63 - 1

    def test_min_int64(self):
        assert parse_int(MIN_INT64_TEXT) == -(2**63)

    def test_max_uint64(self):
        assert parse_uint(MAX_UINT64_TEXT) == 2**64 - 1

    def test_uint_accepts_int64_max_plus_one(self):
        assert parse_uint(MIN_INT64_TEXT[1:]) == 2**63

    def test_int_overflow_positive(self):
        with pytest.raises(NumberOverflowError):
            parse_int(MIN_INT64_TEXT[1:])

    def test_int_overflow_negative(self):
        with pytest.raises(NumberOverflowError):
            parse_int("-九百二十二京三千三百七十二兆三百六十八億五千四百七十七万五千八百九")

    def test_uint_overflow_by_one(self):
        with pytest.raises(NumberOverflowError):
            parse_uint("千八百四十四京六千七百四十四兆七百三十七億九百五十五万千六百十六")

    def test_uint_overflow_in_multiplication(self):
        with pytest.raises(NumberOverflowError):
            parse_uint("二千八百四十四京六千七百四十四兆七百三十七億九百五十五万千六百十五")

    @pytest.mark.parametrize("text", ["一垓", "垓", "二極", "一恒河沙", "一無量大数", "一万一那由他"])
    def test_extended_sections_always_overflow(self, text):
        with pytest.raises(NumberOverflowError):
            parse_uint(text)


# ═══════════════════════════════════════════════════════════════════════
# ERRORS
# ═══════════════════════════════════════════════════════════════════════


class TestParseErrors:
    def test_empty(self):
        with pytest.raises(EmptyInputError):
            parse_uint("")

    def test_empty_after_sign(self):
        with pytest.raises(EmptyInputError):
            parse_int("-")

    @pytest.mark.parametrize("text", GRAMMAR_ERRORS)
    def test_invalid_sequence(self, text):
        with pytest.raises(InvalidSequenceError):
            parse_uint(text)

    @pytest.mark.parametrize("text", ["〇一", "零一"])
    def test_digit_after_leading_zero(self, text):
        with pytest.raises(UnexpectedRuneError) as excinfo:
            parse_uint(text)
        assert excinfo.value.actual == "一"
        assert excinfo.value.expected is None

    def test_unexpected_ascii(self):
        with pytest.raises(UnexpectedRuneError) as excinfo:
            parse_uint("a")
        assert excinfo.value.actual == "a"

    def test_unexpected_rune_after_valid(self):
        with pytest.raises(UnexpectedRuneError) as excinfo:
            parse_uint("一a")
        assert excinfo.value.actual == "a"

    def test_unexpected_kanji(self):
        with pytest.raises(UnexpectedRuneError) as excinfo:
            parse_uint("三日")
        assert excinfo.value.actual == "日"

    def test_unexpected_four_byte_character(self):
        with pytest.raises(UnexpectedRuneError) as excinfo:
            parse_uint("一😀")
        assert excinfo.value.actual == "😀"

    @pytest.mark.parametrize("text", ["\ufffd", "\ufffd一", "一\ufffd", "\ud800"])
    def test_encoding(self, text):
        with pytest.raises(EncodingError):
            parse_uint(text)

    @pytest.mark.parametrize("data", [b"\xe4\xb8", b"\xff\xff\xff", "一".encode("utf-8") + b"\x80"])
    def test_malformed_bytes(self, data):
        with pytest.raises(EncodingError):
            parse_uint(data)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_uint("一一")

    def test_error_codes(self):
        with pytest.raises(KanjiNumberError) as excinfo:
            parse_uint("十百")
        assert excinfo.value.code == "INVALID_SEQUENCE"
