"""
kanji_number: Japanese numerals (漢数字) to integers and back.

Parses and formats 64-bit and arbitrary-precision integers, accepting daiji
and obsolete daiji, with strict grammar checks and precise error kinds.

    parse_int("九百二十二京三千三百七十二兆三百六十八億五千四百七十七万五千八百七")
    format_bigint(10**20)  # "一垓"
"""

from .daiji import from_daiji, to_daiji
from .exceptions import (
    EmptyInputError,
    EncodingError,
    InvalidSequenceError,
    KanjiNumberError,
    NumberOverflowError,
    UnexpectedEOFError,
    UnexpectedRuneError,
)
from .formatter import format_bigint, format_int, format_uint
from .models import DigitClass, Magnitude, SearchResult
from .parse import parse_int, parse_uint
from .parse_bigint import parse_bigint
from .search import NUMERAL_CHARACTER_CLASS, NUMERAL_PATTERN, find_all
from .serial import format_serial_int, format_serial_uint, parse_serial_int, parse_serial_uint
from .values import digit_class_of, magnitude_of, value_of

__version__ = "1.0.0"

__all__ = [
    "DigitClass",
    "EmptyInputError",
    "EncodingError",
    "InvalidSequenceError",
    "KanjiNumberError",
    "Magnitude",
    "NUMERAL_CHARACTER_CLASS",
    "NUMERAL_PATTERN",
    "NumberOverflowError",
    "SearchResult",
    "UnexpectedEOFError",
    "UnexpectedRuneError",
    "digit_class_of",
    "find_all",
    "format_bigint",
    "format_int",
    "format_serial_int",
    "format_serial_uint",
    "format_uint",
    "from_daiji",
    "magnitude_of",
    "parse_bigint",
    "parse_int",
    "parse_serial_int",
    "parse_serial_uint",
    "parse_uint",
    "to_daiji",
    "value_of",
]
