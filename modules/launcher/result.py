"""
ResultItem class representing a search result from the catalogs.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple


@dataclass
class ResultItem:
    """
    Represents a search result that can be displayed and activated.
    """

    # Display information
    name: str
    value: str = "plugin"
    icon: str = ""
    desc: str = ""
    kind: str = ""

    # Ranking
    match_span: Optional[Tuple[int, int]] = None
    rank_hint: int = 0
    is_best_match: bool = False

    # Identity of command results
    plugin_name: str = ""
    feature_code: str = ""
    cmd_type: str = ""

    # Identity of application results
    action: str = ""
    app_name: str = ""
    display_name: Optional[str] = None
    keywords: Tuple[str, ...] = ()

    # Behavior
    invoke: Optional[Callable[[], Any]] = None

    @property
    def is_app(self) -> bool:
        return self.value == "app"

    def activate(self):
        """Activate this result (execute its action)."""
        if self.invoke:
            return self.invoke()
        else:
            raise NotImplementedError("No action defined for this result")

    def __str__(self):
        return (
            f"ResultItem(name='{self.name}', value='{self.value}', "
            f"best={self.is_best_match}, rank={self.rank_hint})"
        )

    def __repr__(self):
        return self.__str__()
