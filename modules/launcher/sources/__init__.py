"""
Search sources for the launcher: plugin commands and installed applications.
"""

from modules.launcher.sources.applications import ApplicationSource, query_apps
from modules.launcher.sources.commands import CommandSource, query_commands

__all__ = ["ApplicationSource", "CommandSource", "query_apps", "query_commands"]
