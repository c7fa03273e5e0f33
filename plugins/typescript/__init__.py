"""
TypeScript language plugin.

This plugin parses TypeScript and JavaScript into the refactoring engine's syntax tree.
"""

from plugins.typescript.plugin import TypeScriptPlugin

__all__ = ['TypeScriptPlugin']
