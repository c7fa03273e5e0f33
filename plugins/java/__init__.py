"""
Java language plugin.

This plugin parses Java into the refactoring engine's syntax tree.
"""

from plugins.java.plugin import JavaPlugin

__all__ = ['JavaPlugin']
