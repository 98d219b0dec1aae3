"""Structured event logger used throughout the decoder."""

from __future__ import annotations

import logging


class ProtocolLogger:
    """Thin wrapper over the ``ircsupport`` stdlib logger.

    Conventions:
        * Use ``logger.log_event(domain="ctcp", action="malformed", sender=..., payload=...)``
        * The event name is ``<domain>_<action>``; the human text comes from the
          template catalog (formatted with the kwargs) or is derived from the
          domain/action words.
        * No handlers are attached here; records propagate to whatever the
          application configured.
    """

    def __init__(self, name: str = "ircsupport") -> None:
        self.logger = logging.getLogger(name)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)

    def log_event(
        self,
        domain: str,
        action: str,
        level: int = logging.INFO,
        human: str | None = None,
        *,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        if not self.logger.isEnabledFor(level):
            return
        event_name = f"{domain}_{action}".lower()
        human_text = human
        if human_text is None:
            # Local import to avoid cyclic import issues during module init.
            from .event_catalog import render_event

            human_text = render_event(domain, action, kwargs)
        msg = self._build_message(event_name, human_text, kwargs)
        self.logger.log(
            level, msg, exc_info=exc_info, extra={"event": event_name, "context": kwargs}
        )

    def _build_message(
        self, event_name: str, human_text: str, kwargs: dict[str, object]
    ) -> str:
        if not self.logger.isEnabledFor(logging.DEBUG):
            return human_text
        context = ", ".join(f"{k}={v!r}" for k, v in kwargs.items())
        # Pad event name to a fixed column for alignment
        base = f"{event_name.ljust(24)} {human_text}"
        if context:
            base = f"{base} ({context})"
        return base


logger = ProtocolLogger()
