"""
Abbreviation and best-match scoring for launcher results.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from loguru import logger

from utils.pinyin import contains_cjk, match_span, normalize_query, transliterate

# Prefix matches on labels up to this length count as best matches
BEST_MATCH_MAX_LENGTH = 5

_WORD_SPLIT_RE = re.compile(r"[\s\-_]+")


def abbreviate(label: str) -> str:
    """
    Build the first-letter abbreviation of a label.

    Chinese labels use the initial of each pinyin syllable ("微信" -> "WX"),
    anything else the initial of each word ("GitHub Desktop" -> "GD").
    Labels that cannot be transliterated abbreviate to an empty string.
    """
    if not label:
        return ""

    if contains_cjk(label):
        try:
            result = transliterate(label)
        except Exception as e:
            logger.debug(f"Failed to transliterate {label!r}: {e}")
            return ""
        if not result.syllables:
            return ""
        return "".join(syllable[:1].upper() for syllable in result.syllables)

    return "".join(word[:1].upper() for word in _WORD_SPLIT_RE.split(label))


def abbreviation_matches(label: str, query: str) -> bool:
    needle = normalize_query(query)
    return bool(needle) and needle in abbreviate(label).lower()


@dataclass(frozen=True)
class MatchQuality:
    span: Optional[Tuple[int, int]]
    exact: bool
    prefix: bool
    abbreviation: bool
    label_length: int

    @property
    def is_best_match(self) -> bool:
        return (
            self.exact
            or (self.prefix and self.label_length <= BEST_MATCH_MAX_LENGTH)
            or self.abbreviation
        )


def score(label: str, query: str, span: Optional[Tuple[int, int]]) -> MatchQuality:
    """
    Classify how well a query matched a label.

    Args:
        label: The text shown for the result
        query: The search query
        span: What match_span(label, query) returned

    Returns:
        MatchQuality with the exact/prefix/abbreviation flags
    """
    prefix = span is not None and span[0] == 0
    exact = prefix and span[1] == len(label) - 1
    return MatchQuality(
        span=span,
        exact=exact,
        prefix=prefix,
        abbreviation=abbreviation_matches(label, query),
        label_length=len(label),
    )


def rank_hint(label: str, query: str, labelled: bool) -> int:
    """Literal commands rank one above labelled ones at equal match quality."""
    hint = 0
    if match_span(label, query):
        hint += 1
    if labelled:
        hint -= 1
    return hint
