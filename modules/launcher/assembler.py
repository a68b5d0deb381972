"""
Merging and deduplication of the per-catalog result lists.
"""

from typing import Hashable, List, Optional, Sequence

from modules.launcher.result import ResultItem


def normalize_name(name: str) -> str:
    return (name or "").lower().strip()


def identity_key(item: ResultItem) -> Hashable:
    """
    Key under which two results count as the same thing.

    Applications are identified by where they live (desc, then action),
    never by the keyword they matched on. Commands by their plugin, feature,
    normalized name and command type, ignoring the description.
    """
    if item.is_app:
        return (
            "app",
            item.desc or item.action or item.display_name or item.app_name or item.name,
        )
    return (
        "plugin",
        item.plugin_name,
        item.feature_code,
        normalize_name(item.name),
        item.cmd_type or item.kind,
    )


def assemble(
    command_results: Sequence[ResultItem], app_results: Sequence[ResultItem]
) -> List[ResultItem]:
    """Commands first, then applications, keeping the first of any duplicates."""
    seen = set()
    results = []
    for item in [*command_results, *app_results]:
        key = identity_key(item)
        if key in seen:
            continue
        seen.add(key)
        results.append(item)
    return results


def select_best(results: Sequence[ResultItem]) -> Optional[ResultItem]:
    """The first best match, falling back to the first result."""
    for item in results:
        if item.is_best_match:
            return item
    return results[0] if results else None
