from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from ircsupport.config import ParserConfig, load_config
from ircsupport.errors import ConfigError


def test_defaults():
    config = ParserConfig()
    assert config.encoding == "irc"
    assert config.capabilities == []
    assert config.isupport == {}


def test_capabilities_are_normalized():
    config = ParserConfig(capabilities=[" identify-msg ", "", "identify-msg", "extended-join"])
    assert config.capabilities == ["identify-msg", "extended-join"]


def test_capabilities_must_be_a_list():
    with pytest.raises(ValidationError):
        ParserConfig(capabilities="identify-msg")


def test_isupport_names_are_upper_cased():
    config = ParserConfig(isupport={" chantypes ": "#&", "excepts": True})
    assert config.isupport == {"CHANTYPES": "#&", "EXCEPTS": True}


def test_unknown_encoding_rejected():
    with pytest.raises(ValidationError):
        ParserConfig(encoding="no-such-codec")


def test_known_encoding_accepted():
    assert ParserConfig(encoding="latin-1").encoding == "latin-1"


def test_load_config_none_gives_defaults():
    assert load_config(None) == ParserConfig()


def test_load_config_from_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"capabilities": ["identify-msg"], "isupport": {"CHANTYPES": "#&"}}))
    config = load_config(path)
    assert config.capabilities == ["identify-msg"]
    assert config.isupport == {"CHANTYPES": "#&"}


def test_load_config_missing_file(tmp_path):
    path = tmp_path / "missing.json"
    with pytest.raises(ConfigError) as exc_info:
        load_config(path)
    assert exc_info.value.data == {"path": str(path)}


@pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"encoding": "no-such-codec"}'])
def test_load_config_invalid_content(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content)
    with pytest.raises(ConfigError):
        load_config(path)
