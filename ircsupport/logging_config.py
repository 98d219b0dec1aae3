r"""
Logging configuration for the ircsupport command-line tools.

Provides a colored console setup using the colorlog library and a structured
error logging helper. The library modules themselves never configure logging;
only the entry points call ``LoggerConfigurator.configure``.
"""

import logging
import os
import sys
from typing import Any

import colorlog


def _debug_enabled() -> bool:
    return os.environ.get("DEBUG", "").lower() in ("true", "1", "yes")


def log_structured_error(
    error_type: str,
    message: str,
    exception: Exception = None,
    context: dict[str, Any] = None,
    level: int = logging.ERROR,
) -> None:
    """Log an error with structured context.

    Args:
        error_type: Category of the error (e.g., 'parse', 'compose', 'config')
        message: Descriptive error message
        exception: The exception that occurred (optional)
        context: Additional context data for debugging
        level: Logging level (default: ERROR)
    """
    structured_message = f"[{error_type.upper()}] {message}"

    if exception:
        structured_message += f" | Exception: {type(exception).__name__}: {str(exception)}"

    if context:
        context_str = " | ".join(f"{k}={v!r}" for k, v in context.items())
        structured_message += f" | Context: {context_str}"

    logging.getLogger("ircsupport").log(level, structured_message)


class LoggerConfigurator:
    """Handles logging configuration cleanly using colorlog.

    Supports environment variable configuration for log levels.
    """

    def __init__(self, config=None):
        """Initialize the configurator.

        Args:
            config: Optional dict; ``stream`` overrides the output stream.
        """
        self.config = config or {}

    def configure(self):
        """Configure logging with colored output using colorlog.

        Uses environment variables:
        - DEBUG: Set to 'true', '1', or 'yes' for DEBUG level, otherwise INFO
        """
        log_level = logging.DEBUG if _debug_enabled() else logging.INFO

        formatter = colorlog.ColoredFormatter(
            "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s %(message_log_color)s%(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "magenta",
            },
            secondary_log_colors={
                "message": {
                    "ERROR": "red",
                    "CRITICAL": "magenta",
                }
            },
            reset=True,
        )

        handler = logging.StreamHandler(self.config.get("stream", sys.stderr))
        handler.setFormatter(formatter)

        logging.basicConfig(
            level=log_level,
            handlers=[handler],
            format="%(message)s",
            force=True,
        )

        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)
        return handler
