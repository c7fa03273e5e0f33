"""
Java Language Plugin.

Parses Java sources with tree-sitter-java.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import tree_sitter
import tree_sitter_java

from plugins.base import TreeSitterPlugin

logger = logging.getLogger(__name__)


class JavaPlugin(TreeSitterPlugin):
    """Java language plugin using tree-sitter."""

    def __init__(
        self,
        config_path: Optional[Path] = None,
        config: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize the Java plugin.

        Args:
            config_path: Path to config.yaml file. If None, uses default location.
            config: Already loaded configuration; skips reading config_path
        """
        if config is None:
            if config_path is None:
                config_path = Path(__file__).parent / "config.yaml"
            config = self.load_config(config_path)

        java_language = tree_sitter.Language(tree_sitter_java.language())
        super().__init__(java_language, config)

        logger.info("Java plugin initialized successfully")
