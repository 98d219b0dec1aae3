from __future__ import annotations

import logging

import pytest

from ircsupport.errors import (
    ConfigError,
    EmbeddedSpaceError,
    IRCSupportError,
    NotIrcProtocolError,
    UnknownModeError,
    UnsupportedMaskError,
)
from ircsupport.errors.handling import classify_error, log_error


@pytest.mark.parametrize(
    "error,category",
    [
        (NotIrcProtocolError("+"), "parse"),
        (EmbeddedSpaceError("a b", 0), "compose"),
        (UnknownModeError("Z"), "mode"),
        (ConfigError("bad"), "config"),
        (UnsupportedMaskError("$r:x"), "internal"),
        (FileNotFoundError("x"), "io"),
        (RuntimeError("x"), "unknown"),
    ],
)
def test_classify_error(error, category):
    assert classify_error(error) == category


def test_error_data_is_copied():
    data = {"line": "x"}
    error = IRCSupportError("boom", data=data)
    data["line"] = "y"
    assert error.data == {"line": "x"}


def test_error_data_defaults_to_empty():
    assert IRCSupportError("boom").data == {}


def test_log_error_includes_error_data(caplog):
    caplog.set_level(logging.ERROR, logger="ircsupport")
    log_error("Failed to decode line", NotIrcProtocolError("+"), context={"lineno": 3})
    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.getMessage().startswith("[PARSE] Failed to decode line: ")
    assert "Exception: NotIrcProtocolError" in record.getMessage()
    assert "line='+'" in record.getMessage()
    assert "lineno=3" in record.getMessage()


def test_log_error_plain_exception(caplog):
    log_error("Oops", RuntimeError("bad"))
    assert "[UNKNOWN] Oops: bad" in caplog.text
    assert "Context" not in caplog.text
