"""
Installed applications from freedesktop desktop entries.
"""

from typing import List

from loguru import logger

from modules.launcher.catalog import AppEntry


def app_entry_from_desktop_app(app) -> AppEntry:
    """Map a fabric DesktopApp onto the launcher's AppEntry."""
    keywords = []
    for keyword in (app.display_name, app.name, app.generic_name, app.executable):
        if keyword and keyword not in keywords:
            keywords.append(keyword)

    command_line = app.command_line or app.executable or ""
    return AppEntry(
        name=app.name or "",
        display_name=app.display_name,
        keywords=tuple(keywords),
        desc=command_line,
        action=command_line,
        icon=getattr(app, "icon_name", None) or "",
    )


def list_apps() -> List[AppEntry]:
    """Enumerate visible desktop applications. Slow; keep it off the UI thread."""
    try:
        from fabric.utils.helpers import get_desktop_applications
    except ImportError as e:
        logger.warning(f"Desktop applications unavailable, install the desktop extra: {e}")
        return []

    try:
        applications = get_desktop_applications(include_hidden=False)
    except Exception as e:
        logger.warning(f"Failed to load applications: {e}")
        return []

    return [app_entry_from_desktop_app(app) for app in applications]
