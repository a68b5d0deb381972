"""
Base class for launcher search sources.
"""

from abc import ABC, abstractmethod
from typing import List

from .result import ResultItem


class SearchSource(ABC):
    """
    Abstract base class for the catalogs the launcher searches.
    All sources must inherit from this class.
    """

    def __init__(self):
        self.name = self.__class__.__name__.lower()
        self.display_name = self.__class__.__name__
        self.description = "A launcher search source"
        self.enabled = True

    @abstractmethod
    def query(self, query_string: str, strict: bool = False) -> List[ResultItem]:
        """
        Process a search query and return results.

        Args:
            query_string: The search query from the user
            strict: Only return results that are safe to run blindly

        Returns:
            List of ResultItem objects, in catalog order
        """
        pass

    def search(self, query_string: str, strict: bool = False) -> List[ResultItem]:
        """Run query() unless the source is disabled."""
        if not self.enabled:
            return []
        return self.query(query_string, strict)

    def set_config(self, config: dict):
        """
        Set source configuration.

        Args:
            config: Dictionary of configuration options
        """
        self.enabled = config.get("enabled", self.enabled)

    def __str__(self):
        return f"SearchSource({self.name})"

    def __repr__(self):
        return self.__str__()
