"""Conversion between wire bytes and text.

The ``"irc"`` pseudo-encoding implements the hybrid scheme popularised by
XChat: input that is valid UTF-8 is read as UTF-8, anything else is read as
CP1252. Output that fits in CP1252 is sent as CP1252, everything else as
UTF-8, which both mIRC and UTF-8 clients display correctly.
"""

from __future__ import annotations

__all__ = ["decode_irc", "encode_irc"]


def decode_irc(data: bytes, encoding: str = "irc") -> str:
    """Decode bytes received from an IRC connection into text."""
    if encoding == "irc":
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            return data.decode("cp1252", errors="replace")
    return data.decode(encoding, errors="replace")


def encode_irc(text: str, encoding: str = "irc") -> bytes:
    """Encode text to be sent over an IRC connection."""
    if encoding == "irc":
        try:
            return text.encode("cp1252")
        except UnicodeEncodeError:
            return text.encode("utf-8")
    return text.encode(encoding, errors="replace")
