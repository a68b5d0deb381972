"""
Click dispatch for launcher results.
"""

import re
import shlex
import subprocess
from dataclasses import dataclass
from typing import Callable, Optional

from loguru import logger

from modules.launcher.catalog import AppEntry, Cmd, Feature, Plugin
from modules.launcher.result import ResultItem

# Desktop entry field codes (%u, %U, %f, %F, %i, %c, ...)
FIELD_CODE_RE = re.compile(r"%\w+")


@dataclass(frozen=True)
class ExtendedPayload:
    """Extra context handed to a plugin opened from a regex or catch-all cmd."""

    code: str
    type: str
    payload: str


@dataclass(frozen=True)
class CommandContext:
    plugin: Plugin
    feature: Feature
    cmd: Cmd
    ext: Optional[ExtendedPayload]
    item: ResultItem


def launch_application(command_line: str):
    cleaned_command = FIELD_CODE_RE.sub("", command_line).strip()
    if not cleaned_command:
        logger.warning(f"Nothing to launch for {command_line!r}")
        return None

    logger.info(f"Launching {cleaned_command}")
    return subprocess.Popen(
        shlex.split(cleaned_command),
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )


class Dispatcher:
    """
    Routes activated results to the plugin host or the application launcher.
    """

    def __init__(
        self,
        open_plugin: Optional[Callable[[CommandContext], None]] = None,
        launcher: Callable[[str], object] = launch_application,
    ):
        self.open_plugin = open_plugin
        self.launcher = launcher

    def dispatch_command(self, context: CommandContext):
        if self.open_plugin is None:
            logger.warning(
                f"No plugin host attached, dropping {context.plugin.name}/{context.feature.code}"
            )
            return
        self.open_plugin(context)

    def dispatch_app(self, entry: AppEntry, item: ResultItem):
        if not entry.action:
            logger.warning(f"Application {entry.name} has no action to run")
            return
        self.launcher(entry.action)
