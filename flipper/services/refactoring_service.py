"""
Refactoring service: one request in, proposed edits out.

Each request picks a language plugin, parses the buffer into a fresh
syntax tree, resolves the cursor and runs every refactoring handler.
Nothing is cached between requests.
"""

import time
import uuid
from typing import List, Optional

from flipper.engine.errors import RefactorError
from flipper.engine.handlers import propose_all
from flipper.models.edit import ProposedEdit
from flipper.utils.logging import (
    get_logger,
    log_error_with_context,
    log_refactoring_request,
)
from plugins.base import LanguagePlugin
from plugins.manager import PluginManager, create_default_plugin_manager

logger = get_logger(__name__)


class UnsupportedLanguageError(RefactorError):
    """Raised when no plugin handles the requested language or file."""
    pass


class SourceTooLargeError(RefactorError):
    """Raised when a buffer exceeds the configured size limit."""
    pass


class RefactoringService:
    """
    Proposes conditional refactorings for a cursor position in a buffer.
    """

    def __init__(
        self,
        plugin_manager: PluginManager,
        indent_width: int = 4,
        max_source_chars: int = 2_000_000,
        default_language: str = "typescript"
    ):
        """
        Initialize the refactoring service.

        Args:
            plugin_manager: Registry of language plugins
            indent_width: Spaces per nesting level in printed code
            max_source_chars: Largest buffer accepted, in characters
            default_language: Language used when neither language nor file path is given
        """
        self.plugin_manager = plugin_manager
        self.indent_width = indent_width
        self.max_source_chars = max_source_chars
        self.default_language = default_language

    def select_plugin(
        self,
        language: Optional[str] = None,
        file_path: Optional[str] = None
    ) -> LanguagePlugin:
        """
        Pick the plugin for a request. An explicit language wins over the
        file extension.

        Raises:
            UnsupportedLanguageError: If no registered plugin matches
        """
        if language:
            plugin = self.plugin_manager.get_plugin(language)
            if plugin is None:
                raise UnsupportedLanguageError(f"Unsupported language: {language}")
            return plugin

        if file_path:
            plugin = self.plugin_manager.get_plugin_for_file(file_path)
            if plugin is None:
                raise UnsupportedLanguageError(f"No language plugin for file: {file_path}")
            return plugin

        plugin = self.plugin_manager.get_plugin(self.default_language)
        if plugin is None:
            raise UnsupportedLanguageError(f"Unsupported language: {self.default_language}")
        return plugin

    def propose(
        self,
        content: str,
        line: int,
        column: int,
        language: Optional[str] = None,
        file_path: Optional[str] = None,
        request_id: Optional[str] = None
    ) -> List[ProposedEdit]:
        """
        Propose refactorings for the cursor at ``line``/``column``.

        Args:
            content: Full buffer text
            line: Cursor line (0-indexed)
            column: Cursor column (0-indexed)
            language: Language name; overrides ``file_path``
            file_path: Path used to pick a language by extension
            request_id: Identifier for log correlation; generated if omitted

        Returns:
            Proposed edits, empty when nothing applies at the cursor

        Raises:
            UnsupportedLanguageError: If no plugin matches
            SourceTooLargeError: If the buffer exceeds ``max_source_chars``
        """
        request_id = request_id or str(uuid.uuid4())
        request_logger = logger.with_context(request_id=request_id)

        if len(content) > self.max_source_chars:
            raise SourceTooLargeError(
                f"Source has {len(content)} characters, limit is {self.max_source_chars}"
            )

        plugin = self.select_plugin(language, file_path)
        start = time.monotonic()

        try:
            tree = plugin.parse(content)
            offset = tree.source.offset_of(line, column)
            edits = propose_all(tree, offset, indent_width=self.indent_width)
        except RefactorError as e:
            log_error_with_context(
                request_logger,
                "Refactoring failed",
                e,
                language=plugin.language_name,
                line=line,
                column=column
            )
            raise

        log_refactoring_request(
            request_logger,
            request_id=request_id,
            language=plugin.language_name,
            line=line,
            column=column,
            edit_count=len(edits),
            duration_ms=(time.monotonic() - start) * 1000
        )
        return edits


_refactoring_service: Optional[RefactoringService] = None


def get_refactoring_service() -> RefactoringService:
    """
    Factory function returning the process-wide RefactoringService,
    configured from application settings.

    Returns:
        RefactoringService instance
    """
    global _refactoring_service

    if _refactoring_service is None:
        from flipper.config import settings

        _refactoring_service = RefactoringService(
            plugin_manager=create_default_plugin_manager(),
            indent_width=settings.indent_width,
            max_source_chars=settings.max_source_chars,
            default_language=settings.default_language
        )

    return _refactoring_service
