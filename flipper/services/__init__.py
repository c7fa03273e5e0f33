"""Business logic services package."""

from flipper.services.refactoring_service import (
    RefactoringService,
    UnsupportedLanguageError,
    SourceTooLargeError,
    get_refactoring_service
)

__all__ = [
    'RefactoringService',
    'UnsupportedLanguageError',
    'SourceTooLargeError',
    'get_refactoring_service'
]
