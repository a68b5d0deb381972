#!/usr/bin/env python3
"""
Tests for abbreviations and best-match scoring.
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import modules.launcher.matching as matching  # noqa: E402
from modules.launcher.matching import (  # noqa: E402
    BEST_MATCH_MAX_LENGTH,
    abbreviate,
    abbreviation_matches,
    rank_hint,
    score,
)
from utils.pinyin import TransliterationError, match_span  # noqa: E402


def test_abbreviate_latin_words():
    assert abbreviate("GitHub Desktop") == "GD"
    assert abbreviate("visual-studio_code") == "VSC"
    assert abbreviate("Firefox") == "F"


def test_abbreviate_chinese():
    assert abbreviate("微信") == "WX"
    assert abbreviate("网易 Music") == "WYM"


def test_abbreviate_empty():
    assert abbreviate("") == ""
    assert abbreviate(None) == ""


def test_transliteration_failure_gives_empty_abbreviation(monkeypatch):
    def broken(text):
        raise TransliterationError("unreadable")

    monkeypatch.setattr(matching, "transliterate", broken)
    assert abbreviate("微信") == ""


def test_abbreviation_match_is_case_insensitive():
    assert abbreviation_matches("GitHub Desktop", "gd")
    assert abbreviation_matches("GitHub Desktop", "GD")
    assert not abbreviation_matches("GitHub Desktop", "gh")


def test_abbreviation_only_match_is_best():
    quality = score("GitHub Desktop", "gd", match_span("GitHub Desktop", "gd"))
    assert quality.span is None
    assert quality.abbreviation
    assert quality.is_best_match


def test_exact_match_is_best_regardless_of_length():
    quality = score("Calculator", "calculator", match_span("Calculator", "calculator"))
    assert quality.exact
    assert quality.is_best_match


def test_short_prefix_is_best():
    label = "abcde"
    assert len(label) == BEST_MATCH_MAX_LENGTH
    quality = score(label, "ab", match_span(label, "ab"))
    assert quality.prefix and not quality.exact
    assert quality.is_best_match


def test_long_prefix_only_is_not_best():
    label = "abcdef"
    quality = score(label, "ab", match_span(label, "ab"))
    assert quality.prefix
    assert not quality.exact
    assert not quality.abbreviation
    assert not quality.is_best_match


def test_inner_match_is_not_best():
    quality = score("Studio", "tud", match_span("Studio", "tud"))
    assert not quality.prefix
    assert not quality.is_best_match


def test_rank_hint_prefers_literal_commands():
    assert rank_hint("calc", "ca", labelled=False) == 1
    assert rank_hint("Calculate", "ca", labelled=True) == 0
    assert rank_hint("Search the web", "xyz", labelled=True) == -1
    assert rank_hint("calc", "xyz", labelled=False) == 0


def test_abbreviation_and_span_see_the_same_query():
    assert abbreviation_matches("GitHub Desktop", "gd ")
    assert abbreviation_matches("GitHub Desktop", " GD")
    assert match_span("GitHub", "git ") == (0, 2)
    assert not abbreviation_matches("GitHub Desktop", "  ")
