#!/usr/bin/env python3
"""
Tests for configuration loading.
"""

import json
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config.data import DEFAULT_CONFIG, PLUGINS_FILE, load_config  # noqa: E402


def test_defaults_when_file_is_missing(tmp_path):
    config = load_config(str(tmp_path / "missing.json"))
    assert config == DEFAULT_CONFIG
    assert config["plugins_file"] == PLUGINS_FILE


def test_user_values_override_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "log_level": "debug",
                "plugins_file": "~/plugins.json",
                "sources": {"applications": {"enabled": False}},
            }
        )
    )
    config = load_config(str(path))
    assert config["log_level"] == "debug"
    assert config["plugins_file"] == os.path.expanduser("~/plugins.json")
    assert config["sources"]["applications"] == {"enabled": False}
    assert config["sources"]["commands"] == {"enabled": True}
    assert config["load_desktop_apps"] is True


def test_defaults_are_not_shared_between_loads(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"sources": {"commands": {"enabled": False}}}))
    load_config(str(path))
    assert DEFAULT_CONFIG["sources"]["commands"] == {"enabled": True}


def test_broken_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2")
    assert load_config(str(path)) == DEFAULT_CONFIG


def test_non_object_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]")
    assert load_config(str(path)) == DEFAULT_CONFIG
