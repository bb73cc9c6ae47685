"""
Custom exception hierarchy for kanji numeral conversion.

Each exception type maps to one category of parse failure, so callers can
catch the base class or react to a specific kind. Every error carries a
machine-readable code for reporting (see search.py and api.py).
"""

from __future__ import annotations


class KanjiNumberError(ValueError):
    """Base exception for all kanji numeral conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class EmptyInputError(KanjiNumberError):
    """The input has no characters where at least one was required."""

    def __init__(self, message: str = "empty string", details: dict | None = None):
        super().__init__("EMPTY", message, details)


class UnexpectedEOFError(KanjiNumberError):
    """A multi-character magnitude word began but the input ended first."""

    def __init__(self, message: str = "unexpected eof", details: dict | None = None):
        super().__init__("UNEXPECTED_EOF", message, details)


class NumberOverflowError(KanjiNumberError):
    """The number does not fit into the requested integer type."""

    def __init__(
        self, message: str = "number overflows datatype", details: dict | None = None
    ):
        super().__init__("OVERFLOW", message, details)


class EncodingError(KanjiNumberError):
    """The input contains an invalid UTF-8 sequence."""

    def __init__(
        self, message: str = "invalid utf-8 encoding", details: dict | None = None
    ):
        super().__init__("INVALID_ENCODING", message, details)


class InvalidSequenceError(KanjiNumberError):
    """The digits are all known but their order is not allowed, e.g. 一一 or 十百."""

    def __init__(
        self, message: str = "invalid sequence of digits", details: dict | None = None
    ):
        super().__init__("INVALID_SEQUENCE", message, details)


class UnexpectedRuneError(KanjiNumberError):
    """A character outside the vocabulary, or one a magnitude word did not expect."""

    def __init__(self, actual: str, expected: str | None = None):
        self.actual = actual
        self.expected = expected
        if expected:
            message = f"unexpected rune: expected {expected}, actual {actual}"
        else:
            message = f"unexpected rune: {actual}"
        details = {"actual": actual}
        if expected:
            details["expected"] = expected
        super().__init__("UNEXPECTED_RUNE", message, details)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnexpectedRuneError):
            return NotImplemented
        return self.actual == other.actual and self.expected == other.expected

    def __hash__(self) -> int:
        return hash((self.actual, self.expected))
