"""
Utility modules for the if-flipper service.
"""

from flipper.utils.logging import (
    get_logger,
    setup_logging,
    LogContext,
    log_refactoring_request,
    log_error_with_context,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "LogContext",
    "log_refactoring_request",
    "log_error_with_context",
]
