"""IRC line grammar: decompose raw lines and compose them back."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from ..encoding import decode_irc
from ..errors import (
    EmbeddedSpaceError,
    InvalidArgumentError,
    MissingCommandError,
    NotIrcProtocolError,
)
from ..logs.logger import logger

TagValue = str | bool

_ILLEGAL = r"\x00\x0a\x0d"
_IRC_LINE = re.compile(
    rf"""
    \A
    (?: @ (?P<tags> [^{_ILLEGAL}\x20]+ ) \x20+ )?
    (?: : (?P<prefix> [^{_ILLEGAL}\x20]+ ) \x20+ )?
    (?P<command> [0-9]{{3}} | [a-zA-Z]+ )
    (?: \x20+ (?P<args>
            [^{_ILLEGAL}\x20:][^{_ILLEGAL}\x20]*
            (?: \x20+ [^{_ILLEGAL}\x20:][^{_ILLEGAL}\x20]* )*
    ) )?
    (?: \x20+ : (?P<trailing> [^{_ILLEGAL}]* ) | \x20* )?
    \x0d? \x0a?
    \Z
    """,
    re.VERBOSE,
)
_SPACES = re.compile(r"\x20+")
_LINE_BREAKING = re.compile(rf"[{_ILLEGAL}]")


@dataclass
class Line:
    """A decomposed IRC protocol line.

    ``args`` holds the middle parameters followed by the trailing one, if
    any; once decomposed there is no difference between the two.
    """

    prefix: str | None = None
    command: str | None = None
    args: list[str] = field(default_factory=list)
    tags: dict[str, TagValue] = field(default_factory=dict)


def _parse_tags(raw_tags: str) -> dict[str, TagValue]:
    tags: dict[str, TagValue] = {}
    for tag in raw_tags.split(";"):
        if not tag:
            continue
        if "=" in tag:
            k, v = tag.split("=", 1)
            tags[k] = v
        else:
            tags[tag] = True
    return tags


def _compose_tags(tags: dict[str, TagValue]) -> str:
    parts = []
    for key, value in tags.items():
        if value is True:
            parts.append(key)
        else:
            parts.append(f"{key}={value}")
    return ";".join(parts)


def decompose(raw_line: str | bytes, encoding: str = "irc") -> Line:
    """Perform low-level parsing of an IRC protocol line.

    Args:
        raw_line: The line, with or without its CR LF terminator. Bytes are
            decoded with :func:`ircsupport.encoding.decode_irc` first.
        encoding: Codec used when ``raw_line`` is bytes.

    Raises:
        NotIrcProtocolError: If the line does not match the IRC grammar.
    """
    if isinstance(raw_line, bytes | bytearray):
        raw_line = decode_irc(bytes(raw_line), encoding)

    match = _IRC_LINE.match(raw_line)
    if match is None:
        logger.log_event("parser", "line_rejected", level=logging.DEBUG, line=raw_line)
        raise NotIrcProtocolError(raw_line)

    line = Line(prefix=match["prefix"], command=match["command"].upper())
    if match["tags"]:
        line.tags = _parse_tags(match["tags"])
    if match["args"]:
        line.args.extend(_SPACES.split(match["args"]))
    if match["trailing"] is not None:
        line.args.append(match["trailing"])
    return line


def compose(line: Line) -> str:
    """Compose an IRC protocol line (without the CR LF terminator).

    The final argument is sent with a leading colon when it needs one.

    Raises:
        MissingCommandError: If the line has no command.
        EmbeddedSpaceError: If a non-final argument contains a space.
        InvalidArgumentError: If a non-final argument is empty or starts
            with a colon, or any argument contains NUL, CR or LF.
    """
    if not line.command:
        raise MissingCommandError()

    parts = []
    if line.tags:
        parts.append(f"@{_compose_tags(line.tags)}")
    if line.prefix:
        parts.append(f":{line.prefix}")
    parts.append(line.command)

    last = len(line.args) - 1
    for idx, arg in enumerate(line.args):
        if _LINE_BREAKING.search(arg):
            raise InvalidArgumentError(arg, idx)
        if idx != last:
            if " " in arg:
                raise EmbeddedSpaceError(arg, idx)
            if not arg or arg.startswith(":"):
                raise InvalidArgumentError(arg, idx)
            parts.append(arg)
        elif " " in arg or not arg or arg.startswith(":"):
            parts.append(f":{arg}")
        else:
            parts.append(arg)

    return " ".join(parts)


__all__ = ["Line", "TagValue", "decompose", "compose"]
