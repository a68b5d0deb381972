import re
from typing import Iterable, List, Optional

from loguru import logger

from modules.launcher.catalog import (
    CatchAllCmd,
    Cmd,
    Feature,
    LiteralCmd,
    Plugin,
    RegexCmd,
)
from modules.launcher.dispatch import CommandContext, Dispatcher, ExtendedPayload
from modules.launcher.matching import abbreviation_matches, rank_hint, score
from modules.launcher.result import ResultItem
from modules.launcher.source_base import SearchSource
from utils.pinyin import match_span


def _cmd_matches(plugin: Plugin, feature: Feature, cmd: Cmd, query: str, strict: bool) -> bool:
    if isinstance(cmd, LiteralCmd):
        return bool(match_span(cmd.text, query)) or abbreviation_matches(cmd.text, query)

    # Typed commands are never run blindly from the global shortcut
    if strict:
        return False

    if isinstance(cmd, RegexCmd):
        try:
            return cmd.compile().search(query) is not None
        except re.error as e:
            logger.warning(
                f"Invalid regex {cmd.pattern!r} in {plugin.name}/{feature.code}: {e}"
            )
            return False

    return isinstance(cmd, CatchAllCmd)


def _build_item(
    plugin: Plugin,
    feature: Feature,
    cmd: Cmd,
    query: str,
    dispatcher: Optional[Dispatcher],
) -> ResultItem:
    name = cmd.display
    labelled = not isinstance(cmd, LiteralCmd)
    span = match_span(name, query)
    quality = score(name, query, span)

    item = ResultItem(
        name=name,
        value="plugin",
        icon=plugin.logo,
        desc=feature.explain,
        kind=plugin.plugin_type,
        match_span=span,
        rank_hint=rank_hint(name, query, labelled),
        is_best_match=quality.is_best_match,
        plugin_name=plugin.name,
        feature_code=feature.code,
        cmd_type=cmd.cmd_type,
    )

    ext = None
    if labelled:
        ext = ExtendedPayload(code=feature.code, type=cmd.cmd_type, payload=query)

    if dispatcher is not None:
        context = CommandContext(plugin=plugin, feature=feature, cmd=cmd, ext=ext, item=item)
        item.invoke = lambda c=context: dispatcher.dispatch_command(c)
    return item


def query_commands(
    plugins: Iterable[Plugin],
    query: str,
    strict: bool = False,
    dispatcher: Optional[Dispatcher] = None,
) -> List[ResultItem]:
    """
    Search the plugin command catalog.

    Literal commands match by pinyin-aware substring or by abbreviation.
    Regex and catch-all commands only take part when strict is False.

    Args:
        plugins: Plugins to scan, in registry order
        query: The raw search query
        strict: Restrict matching to literal commands
        dispatcher: Receives activated results; None leaves them inert

    Returns:
        One ResultItem per matching command, in catalog order
    """
    results = []
    for plugin in plugins:
        if not plugin.features:
            continue
        for feature in plugin.features:
            for cmd in feature.cmds:
                if _cmd_matches(plugin, feature, cmd, query, strict):
                    results.append(_build_item(plugin, feature, cmd, query, dispatcher))
    return results


class CommandSource(SearchSource):
    def __init__(self, registry, dispatcher: Optional[Dispatcher] = None):
        super().__init__()
        self.name = "commands"
        self.display_name = "Commands"
        self.description = "Search commands registered by plugins"
        self.registry = registry
        self.dispatcher = dispatcher

    def query(self, query_string: str, strict: bool = False) -> List[ResultItem]:
        plugins = self.registry.get_local_plugins()
        results = query_commands(plugins, query_string, strict, self.dispatcher)
        logger.debug(
            f"{len(results)} command results for {query_string!r} (strict={strict})"
        )
        return results
