"""
Parse kanji numerals of arbitrary size (up to the 無量大数 tier).

Uses the same unit / multiplier / section grammar as parse.py, on plain
Python ints, and adds the extended-section words from 垓 (10^20) to
無量大数 (10^68). Some of those are spelled with several characters:

    恒河沙  阿僧祇  那由他  不可思議  無量大数

When the first character is seen its value is applied immediately and the
remaining characters are pushed onto a stack of expected characters. Every
following character must match the top of that stack exactly; a mismatch is
an UnexpectedRuneError and running out of input is an UnexpectedEOFError.
"""

from __future__ import annotations

from .decoder import KANJI_BYTES, decode_kanji, to_bytes, unexpected_rune
from .exceptions import (
    EmptyInputError,
    InvalidSequenceError,
    UnexpectedEOFError,
    UnexpectedRuneError,
)
from .magnitudes import (
    EXTENDED_SECTION_STARTS,
    HUNDRED,
    MAN,
    MULTI_CHARACTER_CONTINUATIONS,
    NEGATIVE_PREFIX,
    TEN,
    THOUSAND,
    BigMagnitudeTable,
    big_magnitudes,
)
from .values import lookup

_NEGATIVE_PREFIX_BYTES = NEGATIVE_PREFIX.encode("ascii")
_EXTENDED_CODE_POINTS: frozenset[int] = frozenset(ord(c) for c in EXTENDED_SECTION_STARTS)

# The grammar never places more than four values in one segment (千, 百, 十
# and a unit); anything longer is rejected rather than grown.
SEGMENT_CAPACITY = 16


def parse_bigint(text: str | bytes) -> int:
    """Return the integer represented by the given numerals, without size limit.

    A leading "-" negates the number.

    Raises:
        EmptyInputError: The input (or the input after "-") is empty.
        UnexpectedEOFError: The input ends inside a multi-character word.
        UnexpectedRuneError: Unknown character, or a wrong continuation of a
            multi-character word (`expected` is set in that case).
        InvalidSequenceError: Known characters in a forbidden order.
        EncodingError: The input is not valid UTF-8.
    """
    data = to_bytes(text)
    if not data:
        raise EmptyInputError()
    is_negative = data.startswith(_NEGATIVE_PREFIX_BYTES)
    if is_negative:
        data = data[len(_NEGATIVE_PREFIX_BYTES) :]
        if not data:
            raise EmptyInputError()
    total = _BigIntParser(big_magnitudes()).parse(data)
    return -total if is_negative else total


class _BigIntParser:
    """State of one parse_bigint() call."""

    def __init__(self, magnitudes: BigMagnitudeTable):
        self.magnitudes = magnitudes
        self.total = 0
        # values waiting for the end of the segment, strictly decreasing
        self.segment: list[int] = []
        # smallest 十/百/千 used in the open segment
        self.min_multiplier: int | None = None
        # smallest section word closed so far
        self.min_section: int | None = None
        # remaining characters of a multi-character word, next one on top
        self.expected: list[str] = []

    def parse(self, data: bytes) -> int:
        n = len(data)
        i = 0
        while i < n - 2:
            code_point = decode_kanji(data, i)
            if self.expected:
                self._expect(data, i, code_point)
                i += KANJI_BYTES
                continue

            value = self._value_of(code_point)
            if value:
                if value < MAN:
                    self._push(value)
                else:
                    self._end_segment_with(value)
            elif value == 0:
                if i == 0:
                    i += KANJI_BYTES
                    break
                raise InvalidSequenceError()
            else:
                raise unexpected_rune(data, i)

            continuation = MULTI_CHARACTER_CONTINUATIONS.get(chr(code_point))
            if continuation:
                self.expected.extend(reversed(continuation))
            i += KANJI_BYTES

        if i < n:
            raise unexpected_rune(data, i)
        if self.expected:
            raise UnexpectedEOFError(details={"expected": self.expected[-1]})
        self._end_segment()
        return self.total

    # ─── Lookup ─────────────────────────────────────────────────────

    def _value_of(self, code_point: int) -> int | None:
        value, found = lookup(code_point)
        if found:
            return value
        if code_point in _EXTENDED_CODE_POINTS:
            return self.magnitudes.value_of(chr(code_point))
        return None

    def _expect(self, data: bytes, i: int, code_point: int) -> None:
        expected = self.expected[-1]
        if code_point != ord(expected):
            error = unexpected_rune(data, i)
            if isinstance(error, UnexpectedRuneError):
                error = UnexpectedRuneError(error.actual, expected)
            raise error
        self.expected.pop()

    # ─── Segment Handling ───────────────────────────────────────────

    def _push(self, digit: int) -> None:
        """Integrate a digit below 万 into the open segment."""
        if digit >= TEN:
            if self.min_multiplier is not None and digit >= self.min_multiplier:
                raise InvalidSequenceError()
            self.min_multiplier = digit

        if not self.segment:
            self.segment.append(digit)
            return
        last = self.segment[-1]
        if last < digit:
            if digit < TEN:
                raise InvalidSequenceError()
            if digit in (HUNDRED, THOUSAND) and last >= TEN:
                raise InvalidSequenceError()
            # 二十 → 2 * 10
            self.segment[-1] = last * digit
        elif last > digit and (digit >= TEN or last >= TEN):
            # 十一 → 10 + 1, unless a multiplier follows
            if len(self.segment) >= SEGMENT_CAPACITY:
                raise InvalidSequenceError()
            self.segment.append(digit)
        else:
            raise InvalidSequenceError()

    def _segment_sum(self) -> int:
        segment_sum = 0
        previous: int | None = None
        for value in self.segment:
            if previous is not None and value >= previous:
                raise InvalidSequenceError()
            segment_sum += value
            previous = value
        if segment_sum >= MAN:
            raise InvalidSequenceError()
        return segment_sum

    def _end_segment_with(self, section: int) -> None:
        """Close the open segment with a section word (万 and above)."""
        if not self.segment:
            raise InvalidSequenceError()
        if self.min_section is not None and section >= self.min_section:
            raise InvalidSequenceError()
        multiplier = self._segment_sum()
        if multiplier >= section:
            raise InvalidSequenceError()
        self.total += multiplier * section
        self.min_section = section
        self.segment.clear()
        self.min_multiplier = None

    def _end_segment(self) -> None:
        if self.segment:
            self.total += self._segment_sum()
