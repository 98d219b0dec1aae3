from __future__ import annotations

from ..logging_config import log_structured_error
from .internal import (
    ComposeError,
    ConfigError,
    IRCSupportError,
    ModeError,
    ParseError,
)


def classify_error(error: Exception) -> str:
    """Return the reporting category for an exception."""
    if isinstance(error, ParseError):
        return "parse"
    if isinstance(error, ComposeError):
        return "compose"
    if isinstance(error, ModeError):
        return "mode"
    if isinstance(error, ConfigError):
        return "config"
    if isinstance(error, IRCSupportError):
        return "internal"
    if isinstance(error, OSError):
        return "io"
    return "unknown"


def log_error(message: str, error: Exception, context: dict | None = None) -> None:
    """Logs an error message with the associated exception details.

    The exception's structured ``data`` (for library errors) is merged into
    the logged context so the offending line or mode is visible.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging.
    """
    merged: dict = {}
    if isinstance(error, IRCSupportError):
        merged.update(error.data)
    if context:
        merged.update(context)

    log_structured_error(
        error_type=classify_error(error),
        message=f"{message}: {str(error)}",
        exception=error,
        context=merged or None,
    )


__all__ = ["classify_error", "log_error"]
