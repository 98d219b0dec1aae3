from __future__ import annotations

import codecs
from typing import Any

from pydantic import BaseModel, Field, field_validator


class ParserConfig(BaseModel):
    """Settings for one MessageParser.

    Attributes:
        encoding: Codec for lines handed over as bytes; ``"irc"`` selects the
            UTF-8 with CP1252 fallback scheme.
        capabilities: Capabilities considered enabled from the start.
        isupport: Raw ISUPPORT tokens applied on top of the defaults, e.g.
            ``{"CHANTYPES": "#&", "EXCEPTS": True}``.
    """

    encoding: str = "irc"
    capabilities: list[str] = Field(default_factory=list)
    isupport: dict[str, str | bool] = Field(default_factory=dict)

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        if v == "irc":
            return v
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {v}") from e
        return v

    @field_validator("capabilities", mode="before")
    @classmethod
    def validate_capabilities(cls, v: Any) -> list[str]:
        """Strip whitespace, drop empty names and duplicates, keep order."""
        if not isinstance(v, list):
            raise ValueError("capabilities must be a list")
        validated = []
        for c in v:
            if isinstance(c, str) and c.strip():
                validated.append(c.strip())
        return list(dict.fromkeys(validated))

    @field_validator("isupport")
    @classmethod
    def validate_isupport(cls, v: dict[str, str | bool]) -> dict[str, str | bool]:
        return {name.strip().upper(): value for name, value in v.items() if name.strip()}
