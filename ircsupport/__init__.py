"""ircsupport: decode and encode the IRC wire protocol.

Raw lines become typed message values (``MessageParser.parse``) and
``Line`` objects become raw lines again (``compose``). Helpers for
casemapping, hostmasks, mode strings, numerics, formatting codes and
nickname/channel validation live in their own modules.
"""

from .case import irc_downcase, irc_eql, irc_upcase  # noqa: F401
from .config import ParserConfig  # noqa: F401
from .irc import Line, MessageParser, SessionState, compose, decompose  # noqa: F401
from .masks import matches_mask, matches_mask_array, normalize_mask  # noqa: F401
from .modes import (  # noqa: F401
    ModeChange,
    condense_modes,
    diff_modes,
    parse_channel_modes,
    parse_modes,
)
from .numerics import name_to_numeric, numeric_to_name  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "Line",
    "MessageParser",
    "ModeChange",
    "ParserConfig",
    "SessionState",
    "compose",
    "condense_modes",
    "decompose",
    "diff_modes",
    "irc_downcase",
    "irc_eql",
    "irc_upcase",
    "matches_mask",
    "matches_mask_array",
    "name_to_numeric",
    "normalize_mask",
    "numeric_to_name",
    "parse_channel_modes",
    "parse_modes",
]
