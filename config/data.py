import copy
import json
import os

from loguru import logger

APP_NAME = "skim"

HOME_DIR = os.path.expanduser("~")
CONFIG_DIR = os.path.join(
    os.environ.get("XDG_CONFIG_HOME") or os.path.join(HOME_DIR, ".config"), APP_NAME
)
CONFIG_FILE = os.path.join(CONFIG_DIR, "config.json")
PLUGINS_FILE = os.path.join(CONFIG_DIR, "plugins.json")

DEFAULT_CONFIG = {
    "log_level": "INFO",
    "plugins_file": PLUGINS_FILE,
    "load_desktop_apps": True,
    "sources": {
        "commands": {"enabled": True},
        "applications": {"enabled": True},
    },
}


def load_config(path=None):
    """Load the configuration from config.json, on top of the defaults"""
    path = path or CONFIG_FILE
    config = copy.deepcopy(DEFAULT_CONFIG)

    if os.path.exists(path):
        try:
            with open(path, "r") as f:
                user_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Error loading config {path}: {e}")
            return config

        if not isinstance(user_config, dict):
            logger.warning(f"Ignoring config {path}: expected an object")
            return config

        sources = user_config.pop("sources", {})
        config.update(user_config)
        if isinstance(sources, dict):
            for name, options in sources.items():
                if isinstance(options, dict):
                    config["sources"].setdefault(name, {}).update(options)

    config["plugins_file"] = os.path.expanduser(config["plugins_file"])
    return config
