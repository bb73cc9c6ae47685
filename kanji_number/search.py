"""
Locate kanji numerals inside free text.

The core parsers expect a string that is entirely numeral content. This
module publishes the accepted vocabulary as a regular expression and uses it
to cut maximal numeral spans out of larger text, then hands each span to
parse_bigint(). Spans that fail to parse are reported, not dropped:

    find_all("一一 二二二")
    → [SearchResult(start=0, end=2, text="一一", error="INVALID_SEQUENCE"),
       SearchResult(start=3, end=6, text="二二二", error="INVALID_SEQUENCE")]
"""

from __future__ import annotations

import logging
import re

from .exceptions import KanjiNumberError
from .magnitudes import EXTENDED_SECTION_STARTS, MULTI_CHARACTER_CONTINUATIONS
from .models import SearchResult
from .parse_bigint import parse_bigint
from .values import VOCABULARY

logger = logging.getLogger(__name__)

MULTI_CHARACTER_WORDS: tuple[str, ...] = tuple(
    first + rest for first, rest in MULTI_CHARACTER_CONTINUATIONS.items()
)

# Every single character that may appear in a numeral.
NUMERAL_CHARACTER_CLASS = "[{}]".format(
    "".join(
        sorted(set(VOCABULARY) | (EXTENDED_SECTION_STARTS - set(MULTI_CHARACTER_CONTINUATIONS)))
    )
)

# One or more numeral characters or complete multi-character words.
NUMERAL_EXPRESSION = "(?:{}|{})+".format("|".join(MULTI_CHARACTER_WORDS), NUMERAL_CHARACTER_CLASS)
NUMERAL_PATTERN = re.compile(NUMERAL_EXPRESSION)


def find_all(text: str) -> list[SearchResult]:
    """Return every maximal numeral span of `text`, in order.

    Offsets are character offsets into `text`.
    """
    results: list[SearchResult] = []
    for match in NUMERAL_PATTERN.finditer(text):
        span = match.group(0)
        try:
            value = parse_bigint(span)
        except KanjiNumberError as e:
            logger.debug("Span %r at %d is not a valid numeral: %s", span, match.start(), e)
            results.append(
                SearchResult(start=match.start(), end=match.end(), text=span, error=e.code)
            )
            continue
        results.append(SearchResult(start=match.start(), end=match.end(), text=span, value=value))
    return results
