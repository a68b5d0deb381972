#!/usr/bin/env python3
"""
Tests for the installed application search.
"""

import dataclasses
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from modules.launcher.catalog import AppEntry  # noqa: E402
from modules.launcher.sources.applications import (  # noqa: E402
    ApplicationSource,
    app_identity,
    query_apps,
)

GITHUB = AppEntry(
    name="github-desktop",
    display_name="GitHub Desktop",
    keywords=("GitHub Desktop", "github-desktop"),
    desc="/usr/bin/github-desktop",
    action="github-desktop",
    icon="github-desktop",
)
FIREFOX = AppEntry(
    name="firefox",
    display_name="Firefox",
    keywords=("Firefox", "Firefox Web Browser", "firefox"),
    desc="/usr/lib/firefox/firefox",
    action="firefox %u",
)
WECHAT = AppEntry(
    name="wechat",
    keywords=("微信", "WeChat"),
    desc="/opt/wechat/wechat",
    action="/opt/wechat/wechat",
)


class RecordingDispatcher:
    def __init__(self):
        self.apps = []

    def dispatch_app(self, entry, item):
        self.apps.append((entry, item))


def test_abbreviation_fallback():
    results = query_apps([GITHUB, FIREFOX], "gd")
    assert [item.name for item in results] == ["GitHub Desktop"]
    item = results[0]
    assert item.match_span is None
    assert item.is_best_match
    assert item.value == "app"
    assert item.kind == "app"
    assert item.rank_hint == 0


def test_first_matching_keyword_wins_once():
    results = query_apps([FIREFOX], "fire")
    assert len(results) == 1
    assert results[0].name == "Firefox"
    assert results[0].match_span == (0, 3)


def test_later_keyword_can_match():
    results = query_apps([FIREFOX], "browser")
    assert [item.name for item in results] == ["Firefox Web Browser"]
    assert not results[0].is_best_match


def test_pinyin_keyword():
    results = query_apps([WECHAT], "weixin")
    assert results[0].name == "微信"
    assert results[0].match_span == (0, 1)
    assert results[0].is_best_match


def test_unmatched_apps_are_excluded():
    assert query_apps([GITHUB, FIREFOX, WECHAT], "zzz") == []


def test_catalog_entries_are_not_modified():
    before = dataclasses.replace(GITHUB)
    query_apps([GITHUB], "gd")
    query_apps([GITHUB], "desk")
    assert GITHUB == before
    assert GITHUB.name == "github-desktop"


def test_results_carry_identity_fields():
    item = query_apps([FIREFOX], "fire")[0]
    assert item.desc == "/usr/lib/firefox/firefox"
    assert item.action == "firefox %u"
    assert item.app_name == "firefox"
    assert item.display_name == "Firefox"
    assert item.keywords == FIREFOX.keywords


def test_same_location_appears_once():
    first = AppEntry(name="Foo", keywords=("Foo",), desc="/Applications/Foo.app")
    second = AppEntry(name="Foo Beta", keywords=("Foo Beta",), desc="/Applications/Foo.app")
    results = query_apps([first, second], "foo")
    assert [item.name for item in results] == ["Foo"]


def test_identity_fallbacks():
    assert app_identity(AppEntry(name="a", desc="/x")) == "/x"
    assert app_identity(AppEntry(name="a", action="run-a")) == "run-a"
    assert app_identity(AppEntry(name="a", display_name="A")) == "A"
    assert app_identity(AppEntry(name="a")) == "a"


def test_invoke_dispatches_entry_and_item():
    dispatcher = RecordingDispatcher()
    item = query_apps([FIREFOX], "fire", dispatcher=dispatcher)[0]
    item.activate()
    assert dispatcher.apps == [(FIREFOX, item)]


def test_application_source_holds_snapshot():
    source = ApplicationSource()
    assert source.search("fire") == []

    source.set_apps([FIREFOX, GITHUB])
    assert [item.name for item in source.search("fire")] == ["Firefox"]

    source.set_config({"enabled": False})
    assert source.search("fire") == []
