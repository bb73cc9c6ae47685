"""
Substitution between standard numerals and daiji (大字).

Daiji are the formal numerals written on bank notes and contracts so that a
stroke cannot be added later (一 → 二 → 三). Only the characters still in
official use are produced; obsolete daiji are accepted by from_daiji().

    to_daiji("一万円")   → "壱萬円"
    from_daiji("弐千円") → "二千円"
"""

from __future__ import annotations

from .values import DAIJI_NUMERALS, OBSOLETE_DAIJI_NUMERALS, STANDARD_NUMERALS

_TO_DAIJI: dict[str, str] = {
    "一": "壱",
    "二": "弐",
    "三": "参",
    "五": "伍",
    "十": "拾",
    "万": "萬",
}

# first spelling wins, e.g. 零 over 〇
_STANDARD_BY_VALUE: dict[int, str] = {
    value: character for character, value in reversed(STANDARD_NUMERALS.items())
}

_FROM_DAIJI: dict[str, str] = {
    character: _STANDARD_BY_VALUE[value]
    for character, value in {**DAIJI_NUMERALS, **OBSOLETE_DAIJI_NUMERALS}.items()
}

_TO_DAIJI_TABLE = str.maketrans(_TO_DAIJI)
_FROM_DAIJI_TABLE = str.maketrans(_FROM_DAIJI)


def to_daiji(text: str) -> str:
    """Replace 一 二 三 五 十 万 with their daiji."""
    return text.translate(_TO_DAIJI_TABLE)


def from_daiji(text: str) -> str:
    """Replace current and obsolete daiji with the standard numerals."""
    return text.translate(_FROM_DAIJI_TABLE)
