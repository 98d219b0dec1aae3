"""mIRC color and formatting codes: detection, stripping and styling."""

from __future__ import annotations

import re
from collections.abc import Mapping

__all__ = [
    "ATTRIBUTES",
    "COLORS",
    "has_color",
    "has_formatting",
    "strip_color",
    "strip_formatting",
    "irc_format",
]

_COLOR = re.compile("[\x03\x04\x1b]")
_FORMATTING = re.compile("[\x02\x06\x11\x16\x1d\x1f]")
_MIRC_COLOR = re.compile(r"\x03(?:,\d{1,2}|\d{1,2}(?:,\d{1,2})?)?")
_RGB_COLOR = re.compile(r"\x04[0-9a-fA-F]{0,6}")
_ECMA48_COLOR = re.compile(r"\x1b\[.*?[\x00-\x1f\x40-\x7e]", re.DOTALL)
_NORMAL = "\x0f"

ATTRIBUTES: Mapping[str, str] = {
    "reset": "\x0f",
    "bold": "\x02",
    "underline": "\x1f",
    "underlined": "\x1f",
    "inverse": "\x16",
    "reverse": "\x16",
    "reversed": "\x16",
    "italic": "\x1d",
    "fixed": "\x11",
    "blink": "\x06",
}

COLORS: Mapping[str, str] = {
    "white": "00",
    "black": "01",
    "blue": "02",
    "green": "03",
    "red": "04",
    "brown": "05",
    "purple": "06",
    "orange": "07",
    "yellow": "08",
    "lime": "09",
    "teal": "10",
    "aqua": "11",
    "royal": "12",
    "pink": "13",
    "grey": "14",
    "silver": "15",
}


def has_color(text: str) -> bool:
    return _COLOR.search(text) is not None


def has_formatting(text: str) -> bool:
    return _FORMATTING.search(text) is not None


def strip_color(text: str) -> str:
    """Remove mIRC, RGB and ECMA-48 color codes.

    The ^O cancellation code goes too unless formatting codes remain.
    """
    for pattern in (_MIRC_COLOR, _RGB_COLOR, _ECMA48_COLOR):
        text = pattern.sub("", text)
    if not has_formatting(text):
        text = text.replace(_NORMAL, "")
    return text


def strip_formatting(text: str) -> str:
    """Remove bold/underline/etc. codes, keeping ^O if colors remain."""
    text = _FORMATTING.sub("", text)
    if not has_color(text):
        text = text.replace(_NORMAL, "")
    return text


def irc_format(*args: str) -> str:
    """Apply formatting to the last argument.

    ``irc_format("bold", "red", "text")`` makes ``text`` bold and red. At most
    two colors (foreground, background) may be given. A nested formatted
    string keeps the outer formatting after its own reset.
    """
    if not args:
        raise TypeError("irc_format() needs the text to format")
    *settings, text = args

    attributes = [ATTRIBUTES[k] for k in settings if k in ATTRIBUTES]
    colors = [COLORS[k] for k in settings if k in COLORS]
    if len(colors) > 2:
        raise ValueError("At most two colors (foreground and background) might be specified")

    attribute_string = "".join(attributes)
    color_string = f"\x03{','.join(colors)}" if colors else ""
    prepend = attribute_string + color_string
    reset = ATTRIBUTES["reset"]

    # attributes act as toggles, so e.g. underline+underline = no
    # underline; drop them from nested strings
    text = text.translate({ord(c): None for c in attribute_string})
    text = text.replace(reset, reset + prepend)
    return f"{prepend}{text}{reset}"
