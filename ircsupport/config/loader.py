"""Load ParserConfig objects from JSON files."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from ..errors import ConfigError
from .model import ParserConfig


def load_config(path: str | Path | None) -> ParserConfig:
    """Read a JSON configuration file.

    A missing path (None) yields the defaults.

    Raises:
        ConfigError: If the file cannot be read, is not valid JSON, or
            does not validate.
    """
    if path is None:
        return ParserConfig()
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}", data={"path": str(path)}) from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}", data={"path": str(path)}) from e
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object", data={"path": str(path)})
    try:
        return ParserConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {path}: {e}", data={"path": str(path)}) from e
