"""
Language plugin architecture for the refactoring engine.

This package provides the plugin system that parses source buffers into
syntax trees, including the base plugin interface and plugin manager.
"""

from plugins.base import LanguagePlugin, TreeSitterPlugin
from plugins.manager import PluginManager, create_default_plugin_manager

__all__ = ['LanguagePlugin', 'TreeSitterPlugin', 'PluginManager', 'create_default_plugin_manager']
