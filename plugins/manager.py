"""
Plugin Manager for language plugins.

This module manages plugin registration and selection by language name or
file extension.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional
import yaml

from plugins.base import LanguagePlugin

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages language plugin registration and selection."""

    def __init__(self):
        """Initialize the plugin manager."""
        self._plugins: Dict[str, LanguagePlugin] = {}
        self._extension_map: Dict[str, str] = {}
        self._config_cache: Dict[str, Dict] = {}

    def register_plugin(self, plugin: LanguagePlugin) -> None:
        """
        Register a language plugin.

        Args:
            plugin: LanguagePlugin instance to register
        """
        language_name = plugin.language_name

        if language_name in self._plugins:
            logger.warning(f"Plugin for language '{language_name}' already registered, overwriting")

        self._plugins[language_name] = plugin

        for ext in plugin.file_extensions:
            if ext in self._extension_map:
                logger.warning(
                    f"Extension '{ext}' already mapped to '{self._extension_map[ext]}', "
                    f"overwriting with '{language_name}'"
                )
            self._extension_map[ext] = language_name

        logger.info(
            f"Registered plugin for language '{language_name}' "
            f"with extensions: {plugin.file_extensions}"
        )

    def get_plugin_for_file(self, file_path: str) -> Optional[LanguagePlugin]:
        """
        Get appropriate plugin based on file extension.

        Multi-part extensions (e.g. '.d.ts') are tried before the last suffix.

        Args:
            file_path: Path to the file

        Returns:
            LanguagePlugin instance if found, None otherwise
        """
        suffixes = Path(file_path).suffixes
        for i in range(len(suffixes)):
            ext = "".join(suffixes[i:]).lower()
            language = self._extension_map.get(ext)
            if language:
                return self._plugins.get(language)

        logger.debug(f"No plugin found for file extension '{Path(file_path).suffix}' (file: {file_path})")
        return None

    def get_plugin(self, language_name: str) -> Optional[LanguagePlugin]:
        """
        Get plugin by language name.

        Args:
            language_name: Name of the language (case-insensitive)

        Returns:
            LanguagePlugin instance if found, None otherwise
        """
        return self._plugins.get(language_name.lower())

    def list_supported_languages(self) -> List[str]:
        """
        List all registered language plugins.

        Returns:
            List of language names
        """
        return list(self._plugins.keys())

    def list_supported_extensions(self) -> List[str]:
        """
        List all supported file extensions.

        Returns:
            List of file extensions
        """
        return list(self._extension_map.keys())

    def load_plugin_config(self, plugin_dir: Path) -> Dict:
        """
        Load plugin configuration from YAML file.

        Args:
            plugin_dir: Directory containing the plugin and config.yaml

        Returns:
            Dictionary containing plugin configuration

        Raises:
            FileNotFoundError: If config.yaml is not found
            ValueError: If a required field is missing
            yaml.YAMLError: If config.yaml is malformed
        """
        config_path = plugin_dir / "config.yaml"

        cache_key = str(config_path)
        if cache_key in self._config_cache:
            return self._config_cache[cache_key]

        if not config_path.exists():
            raise FileNotFoundError(f"Plugin configuration not found: {config_path}")

        try:
            with open(config_path, 'r') as f:
                config = yaml.safe_load(f)

            required_fields = ['name', 'version', 'file_extensions', 'node_kinds']
            for field in required_fields:
                if field not in config:
                    raise ValueError(f"Missing required field '{field}' in {config_path}")

            self._config_cache[cache_key] = config

            logger.info(f"Loaded plugin configuration from {config_path}")
            return config

        except yaml.YAMLError as e:
            logger.error(f"Failed to parse plugin configuration {config_path}: {e}")
            raise

    def unregister_plugin(self, language_name: str) -> bool:
        """
        Unregister a plugin.

        Args:
            language_name: Name of the language plugin to unregister

        Returns:
            True if plugin was unregistered, False if not found
        """
        if language_name not in self._plugins:
            return False

        plugin = self._plugins[language_name]

        for ext in plugin.file_extensions:
            if self._extension_map.get(ext) == language_name:
                del self._extension_map[ext]

        del self._plugins[language_name]

        logger.info(f"Unregistered plugin for language '{language_name}'")
        return True

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get plugin manager statistics.

        Returns:
            Dictionary with statistics
        """
        return {
            "total_plugins": len(self._plugins),
            "total_extensions": len(self._extension_map),
            "languages": list(self._plugins.keys())
        }


def create_default_plugin_manager() -> PluginManager:
    """Create a plugin manager with the bundled TypeScript and Java plugins."""
    from plugins.java import JavaPlugin
    from plugins.typescript import TypeScriptPlugin

    manager = PluginManager()
    plugins_dir = Path(__file__).parent
    for plugin_cls, plugin_dir in (
        (TypeScriptPlugin, plugins_dir / "typescript"),
        (JavaPlugin, plugins_dir / "java"),
    ):
        config = manager.load_plugin_config(plugin_dir)
        manager.register_plugin(plugin_cls(config=config))

    return manager
