"""Project logging package.

Contains internal logging utilities (event catalog + ProtocolLogger). Avoid
importing stdlib logging through this package name externally.
"""

from .event_catalog import (  # noqa: F401
    EVENT_TEMPLATES,
    load_event_templates,
    reload_event_templates,
    render_event,
)
from .logger import ProtocolLogger, logger  # noqa: F401

__all__ = [
    "ProtocolLogger",
    "logger",
    "EVENT_TEMPLATES",
    "load_event_templates",
    "reload_event_templates",
    "render_event",
]
