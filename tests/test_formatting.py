from __future__ import annotations

import pytest

from ircsupport.formatting import (
    has_color,
    has_formatting,
    irc_format,
    strip_color,
    strip_formatting,
)


@pytest.mark.parametrize(
    "text",
    ["mIRC color \x0303green and\x0f normal", "\x1b\x00\x40ecma color", "\x04eeff00rgb color"],
)
def test_has_color(text):
    assert has_color(text) is True


@pytest.mark.parametrize("text", ["normal text", "mIRC \x02bold and\x16 reverse"])
def test_has_no_color(text):
    assert has_color(text) is False


def test_has_formatting():
    assert has_formatting("mIRC \x02bold and\x16 reverse") is True
    assert has_formatting("normal text") is False
    assert has_formatting("mIRC color \x0303green and\x0f normal") is False


def test_strip_color():
    colored = "\x0304,05Hi, I am\x03 a \x03,05color\x03 \x0305junkie\x03"
    assert has_color(colored)
    stripped = strip_color(colored)
    assert not has_color(stripped)
    assert stripped == "Hi, I am a color junkie"


def test_strip_formatting():
    formatted = "This is \x02bold\x0f and this is \x1funderlined\x0f"
    assert has_formatting(formatted)
    stripped = strip_formatting(formatted)
    assert not has_formatting(stripped)
    assert stripped == "This is bold and this is underlined"


def test_strip_color_and_formatting():
    form_color = "Foo \x0305\x02bar\x0f baz"
    assert has_color(form_color) and has_formatting(form_color)
    # ^O survives the color pass while formatting is still present
    stripped = strip_color(form_color)
    assert "\x0f" in stripped
    stripped = strip_formatting(stripped)
    assert not has_color(stripped)
    assert not has_formatting(stripped)
    assert stripped == "Foo bar baz"


def test_irc_format_attributes():
    formatted = irc_format("underline", "Hello %s!" % irc_format("bold", "you"))
    assert has_color(formatted) is False
    assert has_formatting(formatted) is True
    assert formatted == "\x1fHello \x02you\x0f\x1f!\x0f"


def test_irc_format_colors():
    colored = irc_format("yellow", "Hello %s!" % irc_format("blue", "you"))
    assert has_color(colored) is True
    assert has_formatting(colored) is False


def test_irc_format_foreground_and_background():
    assert irc_format("red", "black", "x") == "\x0304,01x\x0f"


def test_irc_format_too_many_colors():
    with pytest.raises(ValueError):
        irc_format("blue", "yellow", "orange", "Foo")
