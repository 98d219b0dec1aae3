"""Human-readable text for protocol log events.

Templates live in ``event_templates.json`` next to this module, keyed by
domain and then action, e.g. ``{"ctcp": {"malformed": "..."}}``. Placeholders
are filled from the event's context kwargs.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

EVENT_TEMPLATES: dict[tuple[str, str], str] = {}
TEMPLATES_PATH = Path(__file__).with_name("event_templates.json")


def _flatten(raw: Any) -> dict[tuple[str, str], str]:
    if not isinstance(raw, Mapping):
        raise ValueError("event templates must be a JSON object")
    templates: dict[tuple[str, str], str] = {}
    for domain, actions in raw.items():
        if not isinstance(actions, Mapping):
            continue
        for action, template in actions.items():
            if isinstance(template, str):
                templates[(domain, action)] = template
    return templates


def load_event_templates(path: Path = TEMPLATES_PATH) -> dict[tuple[str, str], str]:
    """Read a template file; a broken file yields a single load_error entry."""
    try:
        with path.open("r", encoding="utf-8") as f:
            return _flatten(json.load(f))
    except FileNotFoundError:
        return {("catalog", "load_error"): f"Event templates file missing: {path.name}"}
    except (OSError, ValueError) as e:
        return {("catalog", "load_error"): f"Failed to load event templates: {e}"[:200]}


def reload_event_templates(path: Path = TEMPLATES_PATH) -> None:
    global EVENT_TEMPLATES  # noqa: PLW0603
    EVENT_TEMPLATES = load_event_templates(path)


def render_event(domain: str, action: str, context: Mapping[str, object]) -> str:
    """Format the template for ``domain``/``action`` with ``context``.

    Events without a template are described by their domain and action words;
    a template whose placeholders are not all supplied is returned as is.
    """
    template = EVENT_TEMPLATES.get((domain, action))
    if template is None:
        return f"{domain.replace('_', ' ')}: {action.replace('_', ' ')}"
    try:
        return template.format(**context)
    except (KeyError, IndexError, ValueError):
        return template


reload_event_templates()

__all__ = [
    "EVENT_TEMPLATES",
    "TEMPLATES_PATH",
    "load_event_templates",
    "reload_event_templates",
    "render_event",
]
