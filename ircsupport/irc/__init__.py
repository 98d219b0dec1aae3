"""IRC protocol decoding package.

Contains the line grammar, CTCP/DCC quoting, ISUPPORT session state, the
typed message models and the MessageParser that ties them together.
"""

from .ctcp import ctcp_dequote, ctcp_quote, low_dequote, low_quote  # noqa: F401
from .dispatcher import MessageParser  # noqa: F401
from .isupport import SessionState, default_isupport  # noqa: F401
from .parser import Line, compose, decompose  # noqa: F401

__all__ = [
    "Line",
    "MessageParser",
    "SessionState",
    "compose",
    "ctcp_dequote",
    "ctcp_quote",
    "decompose",
    "default_isupport",
    "low_dequote",
    "low_quote",
]
