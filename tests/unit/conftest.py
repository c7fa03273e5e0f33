"""Shared fixtures for unit tests."""

import pytest

from plugins.typescript.plugin import TypeScriptPlugin


@pytest.fixture(scope="session")
def ts_plugin():
    """Create a TypeScript plugin instance shared by all tests."""
    return TypeScriptPlugin()


@pytest.fixture
def parse_ts(ts_plugin):
    """Parse TypeScript source into a SyntaxTree."""
    return ts_plugin.parse
