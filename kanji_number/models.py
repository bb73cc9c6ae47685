"""
Data types shared by the lookup table, the parsers and the search helper.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel


# ─── Digit Classes ──────────────────────────────────────────────────


class DigitClass(str, Enum):
    """Grammatical role of a numeral character."""

    ZERO = "ZERO"  # 零, 〇
    UNIT = "UNIT"  # 1 to 9
    SMALL_MULTIPLIER = "SMALL_MULTIPLIER"  # 十, 百, 千
    SECTION = "SECTION"  # 万, 億, 兆, 京
    EXTENDED_SECTION = "EXTENDED_SECTION"  # 垓 and above


# ─── Magnitude ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class Magnitude:
    """Numeric value of a numeral together with its digit class."""

    value: int
    digit_class: DigitClass


# ─── Search Result ──────────────────────────────────────────────────


class SearchResult(BaseModel):
    """A numeral span found inside free text.

    Offsets are character offsets into the searched string, `end` exclusive.
    If the span is not a valid numeral, `value` is 0 and `error` holds the
    error code of the failed parse.
    """

    start: int
    end: int
    text: str
    value: int = 0
    error: Optional[str] = None
