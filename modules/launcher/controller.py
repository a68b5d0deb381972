from typing import Callable, List, Optional, Sequence

from loguru import logger

from modules.launcher.assembler import assemble, select_best
from modules.launcher.catalog import AppEntry
from modules.launcher.result import ResultItem
from modules.launcher.sources import ApplicationSource, CommandSource

# Constants
SEARCH_DEBOUNCE_MS = 100


class QueryController:
    """
    Turns search box edits into published result lists.

    Edits are debounced; the global shortcut path resolves immediately in
    strict mode and activates the best candidate.
    """

    def __init__(
        self,
        commands: CommandSource,
        applications: ApplicationSource,
        scheduler,
        plugin_active: Callable[[], bool] = lambda: False,
        clipboard_active: Callable[[], bool] = lambda: False,
    ):
        self.commands = commands
        self.applications = applications
        self.scheduler = scheduler
        self.plugin_active = plugin_active
        self.clipboard_active = clipboard_active

        self.query = ""
        self.results: List[ResultItem] = []
        self._pending = None
        self._subscribers: List[Callable[[List[ResultItem]], None]] = []

    def connect(self, callback: Callable[[List[ResultItem]], None]):
        """Call callback with every published result list."""
        self._subscribers.append(callback)

    def set_apps(self, apps: Sequence[AppEntry]):
        self.applications.set_apps(apps)

    def set_query(self, text: str):
        """Handle search text changes."""
        query = text or ""
        self.query = query
        self._cancel_pending()

        if self.plugin_active() or self.clipboard_active() or not query:
            self._publish([])
            return

        # Debounce search to avoid too many queries
        self._pending = self.scheduler.timeout_add(
            SEARCH_DEBOUNCE_MS, self._perform_search, query
        )

    def _cancel_pending(self):
        if self._pending is not None:
            self.scheduler.source_remove(self._pending)
            self._pending = None

    def _perform_search(self, query: str) -> bool:
        self._pending = None
        # Only search if query hasn't changed
        if query != self.query:
            return False

        self._publish(self.resolve(query))
        return False  # Don't repeat timeout

    def _publish(self, results: List[ResultItem]):
        self.results = results
        for callback in self._subscribers:
            callback(results)

    def resolve(self, query: str, strict: bool = False) -> List[ResultItem]:
        """Resolve a query against both catalogs right away."""
        return assemble(
            self.commands.search(query, strict),
            self.applications.search(query, strict),
        )

    def resolve_strict(self, query: str) -> Optional[ResultItem]:
        """
        Resolve in strict mode and activate the best candidate.

        Args:
            query: The raw query carried by the shortcut

        Returns:
            The activated result, or None when nothing matched
        """
        if not query or not query.strip():
            logger.debug("Ignoring global shortcut with an empty query")
            return None

        results = self.resolve(query, strict=True)
        best = select_best(results)
        if best is None:
            logger.debug(f"No candidate for global shortcut query {query!r}")
            return None

        try:
            best.activate()
        except Exception as e:
            logger.warning(f"Failed to activate {best.name}: {e}")
        return best

    on_global_shortcut = resolve_strict
