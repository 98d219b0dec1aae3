"""Error hierarchy and error-reporting helpers."""

from .internal import (  # noqa: F401
    ComposeError,
    ConfigError,
    EmbeddedSpaceError,
    InvalidArgumentError,
    IRCSupportError,
    MissingCommandError,
    ModeError,
    NotIrcProtocolError,
    ParseError,
    UnknownModeError,
    UnsupportedCasemappingError,
    UnsupportedMaskError,
)

__all__ = [
    "IRCSupportError",
    "ParseError",
    "NotIrcProtocolError",
    "ComposeError",
    "MissingCommandError",
    "EmbeddedSpaceError",
    "InvalidArgumentError",
    "ModeError",
    "UnknownModeError",
    "UnsupportedCasemappingError",
    "UnsupportedMaskError",
    "ConfigError",
]
