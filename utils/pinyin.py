"""
Pinyin-aware text matching primitives.
"""

import re
from functools import lru_cache
from typing import List, NamedTuple, Optional, Tuple

from pypinyin import Style, lazy_pinyin, pinyin

CJK_PATTERN = "\u3400-\u4dbf\u4e00-\u9fff"
CJK_RE = re.compile(f"[{CJK_PATTERN}]")
_TOKEN_RE = re.compile(f"[{CJK_PATTERN}]+|[^\\s\\-_{CJK_PATTERN}]+")


class TransliterationError(ValueError):
    """Raised when text cannot be turned into pinyin syllables."""


class Transliteration(NamedTuple):
    units: List[str]
    syllables: List[str]


def normalize_query(query: str) -> str:
    """The form of a query every matcher compares against."""
    return (query or "").strip().lower()


def contains_cjk(text: str) -> bool:
    return bool(text) and CJK_RE.search(text) is not None


@lru_cache(maxsize=4096)
def _readings(char: str) -> Tuple[str, ...]:
    """All lowercase readings for a single character, itself included."""
    readings = [char.lower()]
    if CJK_RE.match(char):
        for reading in pinyin(char, style=Style.NORMAL, heteronym=True)[0]:
            if reading and reading not in readings:
                readings.append(reading.lower())
    return tuple(readings)


def _walk(text: str, index: int, query: str, pos: int) -> Optional[int]:
    # Returns the index of the last character consumed, or None.
    if index >= len(text):
        return None

    for reading in _readings(text[index]):
        longest = min(len(reading), len(query) - pos)
        for size in range(longest, 0, -1):
            if reading[:size] != query[pos : pos + size]:
                continue
            if pos + size == len(query):
                return index
            end = _walk(text, index + 1, query, pos + size)
            if end is not None:
                return end
    return None


def match_span(text: str, query: str) -> Optional[Tuple[int, int]]:
    """
    Find where query matches inside text.

    Latin text is matched as a case-insensitive substring. Text containing
    Chinese characters can also be matched by full pinyin, pinyin initials
    or any mix of the two ("wx", "weixin" and "weix" all match "微信").

    Args:
        text: The label to search in
        query: What the user typed

    Returns:
        (start, end) character indexes, end inclusive, or None
    """
    if not text or not query:
        return None

    needle = normalize_query(query)
    if not needle:
        return None

    start = text.lower().find(needle)
    if start >= 0:
        return start, start + len(needle) - 1

    if not contains_cjk(text):
        return None

    for index in range(len(text)):
        end = _walk(text, index, needle, 0)
        if end is not None:
            return index, end
    return None


def transliterate(text: str) -> Transliteration:
    """
    Split text into units with one romanized syllable per unit.

    Chinese characters become one unit each; other words stay whole.

    Raises:
        TransliterationError: if the text has no Chinese characters or a
            character has no known reading
    """
    if not contains_cjk(text):
        raise TransliterationError(f"No CJK characters in {text!r}")

    units: List[str] = []
    syllables: List[str] = []
    for token in _TOKEN_RE.findall(text):
        if not CJK_RE.match(token):
            units.append(token)
            syllables.append(token.lower())
            continue

        readings = lazy_pinyin(token, style=Style.NORMAL, errors="ignore")
        if len(readings) != len(token):
            raise TransliterationError(f"Unreadable characters in {token!r}")
        units.extend(token)
        syllables.extend(readings)

    return Transliteration(units, syllables)
