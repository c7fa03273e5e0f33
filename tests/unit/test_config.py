"""
Unit tests for configuration management.
"""

from unittest.mock import patch
import os


def test_settings_loads_from_environment():
    """Test that settings can be loaded from environment variables."""
    with patch.dict(os.environ, {
        'LOG_LEVEL': 'DEBUG',
        'INDENT_WIDTH': '2',
        'MAX_SOURCE_CHARS': '5000',
        'DEFAULT_LANGUAGE': 'java',
        'PORT': '9000',
    }):
        from flipper.config import Settings
        settings = Settings()

        assert settings.log_level == 'DEBUG'
        assert settings.indent_width == 2
        assert settings.max_source_chars == 5000
        assert settings.default_language == 'java'
        assert settings.port == 9000


def test_settings_has_default_values():
    """Test that settings have appropriate default values."""
    with patch.dict(os.environ, {}, clear=True):
        from flipper.config import Settings
        settings = Settings()

        assert settings.log_level == 'INFO'
        assert settings.indent_width == 4
        assert settings.max_source_chars == 2_000_000
        assert settings.default_language == 'typescript'
        assert settings.host == '0.0.0.0'
        assert settings.port == 8000
