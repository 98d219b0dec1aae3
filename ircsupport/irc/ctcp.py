"""
Client-To-Client Protocol quoting, per the `best available
spec <http://www.irchelp.org/irchelp/rfc/ctcpspec.html>`_.

Two layers of quoting are involved. The low level (M-QUOTE, ``\\x10``)
protects NUL, CR and LF on the wire; the CTCP level (X-QUOTE, backslash)
protects the ``\\x01`` delimiter inside tagged data.
"""

from __future__ import annotations

import ipaddress
import re

__all__ = [
    "DELIMITER",
    "low_quote",
    "low_dequote",
    "ctcp_quote",
    "ctcp_dequote",
    "dcc_address",
    "dcc_filename",
    "DCC_CHAT_ARGS",
    "DCC_SEND_ARGS",
    "DCC_ACCEPT_ARGS",
]

DELIMITER = "\x01"
LOW_LEVEL_QUOTE = "\x10"

_LOW_QUOTE_FROM = re.compile("[\x00\x0a\x0d\x10]")
_LOW_QUOTE_TO = {
    "\x00": "\x100",
    "\x0a": "\x10n",
    "\x0d": "\x10r",
    "\x10": "\x10\x10",
}
_LOW_DEQUOTE_FROM = re.compile("\x10[0nr\x10]")
_LOW_DEQUOTE_TO = {v: k for k, v in _LOW_QUOTE_TO.items()}

_CTCP_ESCAPE = re.compile(r"\\(.)", re.DOTALL)
_CTCP_UNESCAPE = {"\\": "\\", "a": DELIMITER}

# DCC argument shapes; a filename is either a quoted string or one word.
DCC_CHAT_ARGS = re.compile(r'(?:".+"|[^ ]+) +(?P<address>\S+) +(?P<port>\d+)')
DCC_SEND_ARGS = re.compile(
    r'(?P<filename>".+"|[^ ]+) +(?P<address>\S+) +(?P<port>\d+)(?: +(?P<size>\d+))?'
)
DCC_ACCEPT_ARGS = re.compile(r'(?P<filename>".+"|[^ ]+) +(?P<port>\d+) +(?P<position>\d+)')


def low_quote(line: str) -> str:
    return _LOW_QUOTE_FROM.sub(lambda m: _LOW_QUOTE_TO[m[0]], line)


def low_dequote(line: str) -> str:
    return _LOW_DEQUOTE_FROM.sub(lambda m: _LOW_DEQUOTE_TO[m[0]], line)


def _unescape_chunk(chunk: str) -> str:
    return _CTCP_ESCAPE.sub(lambda m: _CTCP_UNESCAPE.get(m[1], m[1]), chunk)


def ctcp_quote(ctcp_type: str, message: str | None = None) -> str:
    """CTCP-quote a message, e.g. ``ctcp_quote("ACTION", "dances")``."""
    body = ctcp_type
    if message:
        quoted = low_quote(message).replace("\\", "\\\\").replace(DELIMITER, "\\a")
        body = f"{ctcp_type} {quoted}"
    return f"{DELIMITER}{body}{DELIMITER}"


def ctcp_dequote(line: str) -> tuple[list[str], list[str]]:
    """Split a message body into its CTCP chunks and its plain text chunks.

    If the body begins with the delimiter the first chunk is a CTCP,
    otherwise chunks alternate starting with plain text. An unbalanced
    trailing delimiter is turned into a literal escape before splitting.
    """
    line = low_dequote(line)

    if line.count(DELIMITER) % 2 != 0:
        idx = line.rindex(DELIMITER)
        line = line[:idx] + "\\a" + line[idx + 1 :]

    if DELIMITER not in line:
        return [], [_unescape_chunk(line)]

    chunks = line.split(DELIMITER)
    if not chunks[0]:
        chunks.pop(0)
    if chunks and not chunks[-1]:
        chunks.pop()
    chunks = [_unescape_chunk(chunk) for chunk in chunks]

    ctcps: list[str] = []
    texts: list[str] = []
    if line.startswith(DELIMITER) and chunks:
        ctcps.append(chunks.pop(0))
    while chunks:
        texts.append(chunks.pop(0))
        if chunks:
            ctcps.append(chunks.pop(0))
    return ctcps, texts


def dcc_address(
    raw: str,
) -> ipaddress.IPv4Address | str:
    """Decode a DCC address.

    A decimal integer is a 32-bit IPv4 address in network byte order;
    anything else is returned unchanged.
    """
    if raw.isdigit():
        try:
            return ipaddress.IPv4Address(int(raw))
        except ipaddress.AddressValueError:
            return raw
    return raw


def dcc_filename(raw: str) -> str:
    """Strip the quotes from a quoted DCC filename."""
    if raw.startswith('"') and raw.endswith('"') and len(raw) > 1:
        raw = raw[1:-1].replace("\\\\", "\\").replace('\\"', '"')
    return raw
