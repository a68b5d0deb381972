import json
import os
from typing import List, Optional

from loguru import logger

from config.data import PLUGINS_FILE
from modules.launcher.catalog import CatalogError, Plugin, parse_plugin


class PluginRegistry:
    """
    Locally installed plugins, read from a JSON manifest file.

    The file holds either {"plugins": [...]} or a bare list of plugin
    manifests with name, logo, pluginType and features.
    """

    def __init__(self, config_path: Optional[str] = None):
        if config_path is None:
            config_path = PLUGINS_FILE

        self.config_path = config_path
        self._loaded: List[Plugin] = []
        self._registered: List[Plugin] = []
        self.reload()

    def reload(self):
        """Re-read the manifest file."""
        manifests = []
        if os.path.exists(self.config_path):
            try:
                with open(self.config_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"Error loading plugin registry {self.config_path}: {e}")
                data = []

            if isinstance(data, dict):
                data = data.get("plugins", [])
            if isinstance(data, list):
                manifests = data
            else:
                logger.warning(f"Plugin registry {self.config_path} is not a list")

        plugins = []
        for manifest in manifests:
            try:
                plugins.append(parse_plugin(manifest, on_error=self._skip_entry))
            except CatalogError as e:
                logger.warning(f"Skipping plugin: {e}")

        self._loaded = plugins
        logger.info(f"Loaded {len(plugins)} plugins from {self.config_path}")

    @staticmethod
    def _skip_entry(error: CatalogError):
        logger.warning(f"Skipping plugin entry: {error}")

    def register(self, plugin: Plugin):
        """Add a plugin that lives in-process rather than in the manifest file."""
        self._registered.append(plugin)

    def get_local_plugins(self) -> List[Plugin]:
        return [*self._loaded, *self._registered]
