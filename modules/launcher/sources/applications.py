from typing import Iterable, List, Optional, Sequence

from loguru import logger

from modules.launcher.catalog import AppEntry
from modules.launcher.dispatch import Dispatcher
from modules.launcher.matching import abbreviation_matches, score
from modules.launcher.result import ResultItem
from modules.launcher.source_base import SearchSource
from utils.pinyin import match_span


def app_identity(entry: AppEntry) -> str:
    return entry.desc or entry.action or entry.display_name or entry.name


def _build_item(
    entry: AppEntry, keyword: str, query: str, dispatcher: Optional[Dispatcher]
) -> ResultItem:
    span = match_span(keyword, query)
    quality = score(keyword, query, span)
    item = ResultItem(
        name=keyword,
        value="app",
        icon=entry.icon,
        desc=entry.desc,
        kind=entry.plugin_type,
        match_span=span,
        rank_hint=0,
        is_best_match=quality.is_best_match,
        action=entry.action,
        app_name=entry.name,
        display_name=entry.display_name,
        keywords=tuple(entry.keywords),
    )
    if dispatcher is not None:
        item.invoke = lambda e=entry, i=item: dispatcher.dispatch_app(e, i)
    return item


def query_apps(
    apps: Iterable[AppEntry], query: str, dispatcher: Optional[Dispatcher] = None
) -> List[ResultItem]:
    """
    Search installed applications by their keywords.

    The first keyword that matches (by pinyin-aware substring or by
    abbreviation) decides the result, so an application shows up at most
    once. The catalog entries themselves are left untouched.
    """
    results = []
    seen = set()
    for entry in apps:
        for keyword in entry.keywords:
            if not keyword:
                continue
            if match_span(keyword, query) or abbreviation_matches(keyword, query):
                identity = app_identity(entry)
                if identity not in seen:
                    seen.add(identity)
                    results.append(_build_item(entry, keyword, query, dispatcher))
                break
    return results


class ApplicationSource(SearchSource):
    def __init__(
        self,
        apps: Optional[Sequence[AppEntry]] = None,
        dispatcher: Optional[Dispatcher] = None,
    ):
        super().__init__()
        self.name = "applications"
        self.display_name = "Applications"
        self.description = "Search and launch installed applications"
        self.apps: List[AppEntry] = list(apps or [])
        self.dispatcher = dispatcher

    def set_apps(self, apps: Sequence[AppEntry]):
        """Replace the application snapshot searched by later queries."""
        self.apps = list(apps)
        logger.info(f"Application catalog holds {len(self.apps)} entries")

    def query(self, query_string: str, strict: bool = False) -> List[ResultItem]:
        results = query_apps(self.apps, query_string, self.dispatcher)
        logger.debug(f"{len(results)} application results for {query_string!r}")
        return results
