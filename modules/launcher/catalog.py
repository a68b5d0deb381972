"""
Catalog types read by the launcher search: plugins and installed applications.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple, Union

TEXT_CMD = "text"
REGEX_CMD = "regex"
CATCH_ALL_CMD = "over"

_JS_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "g": 0,
    "y": 0,
}
_DELIMITED_RE = re.compile(r"^/(.*)/([a-z]*)$", re.DOTALL)


class CatalogError(ValueError):
    """Raised for plugin manifest entries that cannot be understood."""


@dataclass(frozen=True)
class LiteralCmd:
    text: str

    cmd_type = TEXT_CMD

    @property
    def label(self) -> Optional[str]:
        return None

    @property
    def display(self) -> str:
        return self.text


@dataclass(frozen=True)
class RegexCmd:
    pattern: str
    label: str

    cmd_type = REGEX_CMD

    @property
    def display(self) -> str:
        return self.label

    def compile(self) -> "re.Pattern":
        """Compile the pattern, accepting the /body/flags form plugins ship."""
        match = _DELIMITED_RE.match(self.pattern)
        if not match:
            return re.compile(self.pattern)

        body, js_flags = match.groups()
        flags = 0
        for flag in js_flags:
            if flag not in _JS_FLAGS:
                raise re.error(f"unsupported flag {flag!r}")
            flags |= _JS_FLAGS[flag]
        return re.compile(body, flags)


@dataclass(frozen=True)
class CatchAllCmd:
    label: str

    cmd_type = CATCH_ALL_CMD

    @property
    def display(self) -> str:
        return self.label


Cmd = Union[LiteralCmd, RegexCmd, CatchAllCmd]


@dataclass(frozen=True)
class Feature:
    code: str
    explain: str = ""
    cmds: Tuple[Cmd, ...] = ()


@dataclass(frozen=True)
class Plugin:
    name: str
    logo: str = ""
    plugin_type: str = "ui"
    features: Tuple[Feature, ...] = ()


@dataclass(frozen=True)
class AppEntry:
    """An installed application as reported by the platform enumerator."""

    name: str
    keywords: Tuple[str, ...] = ()
    desc: str = ""
    action: str = ""
    icon: str = ""
    display_name: Optional[str] = None
    plugin_type: str = field(default="app")


def parse_cmd(raw: Union[str, Dict[str, Any]]) -> Cmd:
    """
    Build a command from its manifest form.

    Args:
        raw: A plain string for a literal command, or a dict with a "type"
             of "regex" (with "match" and "label") or "over" (with "label")

    Returns:
        The matching command variant
    """
    if isinstance(raw, str):
        return LiteralCmd(raw)

    if not isinstance(raw, dict):
        raise CatalogError(f"Unsupported cmd entry: {raw!r}")

    cmd_type = raw.get("type")
    label = raw.get("label") or ""
    if cmd_type == REGEX_CMD:
        pattern = raw.get("match")
        if not isinstance(pattern, str):
            raise CatalogError(f"Regex cmd {label!r} has no match pattern")
        return RegexCmd(pattern=pattern, label=label)
    if cmd_type == CATCH_ALL_CMD:
        return CatchAllCmd(label=label)
    raise CatalogError(f"Unknown cmd type {cmd_type!r}")


def parse_feature(
    raw: Dict[str, Any], on_error: Optional[Callable[[CatalogError], None]] = None
) -> Feature:
    """Build a feature; bad cmds are skipped when on_error is given."""
    if not isinstance(raw, dict) or "code" not in raw:
        raise CatalogError(f"Feature without code: {raw!r}")

    cmds = []
    for entry in raw.get("cmds") or []:
        try:
            cmds.append(parse_cmd(entry))
        except CatalogError as e:
            if on_error is None:
                raise
            on_error(e)

    return Feature(code=str(raw["code"]), explain=raw.get("explain", ""), cmds=tuple(cmds))


def parse_plugin(
    raw: Dict[str, Any], on_error: Optional[Callable[[CatalogError], None]] = None
) -> Plugin:
    """Build a plugin; bad features and cmds are skipped when on_error is given."""
    if not isinstance(raw, dict) or not raw.get("name"):
        raise CatalogError(f"Plugin without name: {raw!r}")

    features = []
    for entry in raw.get("features") or []:
        try:
            features.append(parse_feature(entry, on_error))
        except CatalogError as e:
            if on_error is None:
                raise
            on_error(e)

    return Plugin(
        name=raw["name"],
        logo=raw.get("logo", ""),
        plugin_type=raw.get("pluginType", raw.get("plugin_type", "ui")),
        features=tuple(features),
    )
