"""Centralized error hierarchy.

Every failure the decoder can report is an ``IRCSupportError``. Callers that
only care about "bad input" can catch ``ValueError`` instead, since each
concrete kind also derives from it.

Classes:
  IRCSupportError              – Base for all library errors.
  ParseError                   – A line could not be decomposed.
  NotIrcProtocolError          – The line does not match the IRC grammar.
  ComposeError                 – A Line object cannot be turned into wire text.
  MissingCommandError          – No command was set on the Line.
  EmbeddedSpaceError           – A non-final argument contains a space.
  InvalidArgumentError         – An argument cannot be represented on the wire.
  ModeError                    – A mode string cannot be interpreted.
  UnknownModeError             – A mode letter belongs to no CHANMODES class.
  UnsupportedCasemappingError  – Casemapping outside ascii/rfc1459/strict-rfc1459.
  UnsupportedMaskError         – Extended ban masks ('$') are not supported.
  ConfigError                  – Configuration file is unreadable or invalid.
"""

from __future__ import annotations

from collections.abc import Mapping


class IRCSupportError(Exception):
    """Base class for all ircsupport errors with metadata support.

    Attributes:
        data: Dictionary containing structured context about the failure.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class ParseError(IRCSupportError, ValueError):
    """Raised when raw input cannot be decomposed into a Line."""


class NotIrcProtocolError(ParseError):
    """Raised when a line does not match the IRC line grammar.

    The offending line is available as ``data["line"]``.
    """

    def __init__(self, line: str) -> None:
        super().__init__(f"Line is not IRC protocol: {line!r}", data={"line": line})


class ComposeError(IRCSupportError, ValueError):
    """Raised when a Line cannot be composed into wire text."""


class MissingCommandError(ComposeError):
    """Raised when composing a Line that has no command."""

    def __init__(self) -> None:
        super().__init__("You must specify a command")


class EmbeddedSpaceError(ComposeError):
    """Raised when a non-final argument contains a space."""

    def __init__(self, argument: str, index: int) -> None:
        super().__init__(
            "Only the last argument may contain spaces",
            data={"argument": argument, "index": index},
        )


class InvalidArgumentError(ComposeError):
    """Raised when an argument cannot be represented on the wire.

    A non-final argument must be non-empty and not start with a colon; no
    argument may contain NUL, CR or LF.
    """

    def __init__(self, argument: str, index: int) -> None:
        super().__init__(
            f"Argument {index} cannot be sent: {argument!r}",
            data={"argument": argument, "index": index},
        )


class ModeError(IRCSupportError, ValueError):
    """Raised when a mode string cannot be interpreted."""


class UnknownModeError(ModeError):
    """Raised when a channel mode letter is not in the CHANMODES table."""

    def __init__(self, mode: str) -> None:
        super().__init__(f"Unknown mode: {mode}", data={"mode": mode})


class UnsupportedCasemappingError(IRCSupportError, ValueError):
    """Raised for a casemapping other than ascii, rfc1459 or strict-rfc1459."""

    def __init__(self, casemapping: object) -> None:
        super().__init__(
            f"Unsupported casemapping {casemapping}",
            data={"casemapping": casemapping},
        )


class UnsupportedMaskError(IRCSupportError, ValueError):
    """Raised for extended ban masks, which contain a '$'."""

    def __init__(self, mask: str) -> None:
        super().__init__("Extended bans are not supported", data={"mask": mask})


class ConfigError(IRCSupportError, ValueError):
    """Raised when a configuration file cannot be loaded or validated."""


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
