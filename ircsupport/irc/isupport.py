"""ISUPPORT (numeric 005) value transforms and per-connection session state.

See: http://tools.ietf.org/html/draft-brocklesby-irc-isupport-03
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field

from ..logs.logger import logger

ISupportValue = int | float | bool | str | set | dict

UNLIMITED = math.inf

FEATURE_DISABLED_PREFIX = "-"

_PREFIX_VALUE = re.compile(r"\A\((?P<modes>.+)\)(?P<prefixes>.+)\Z")


def default_isupport() -> dict[str, ISupportValue]:
    """Return a fresh copy of the defaults assumed before any 005 arrives."""
    return {
        "PREFIX": {"o": "@", "v": "+"},
        "CHANTYPES": {"#"},
        "CHANMODES": {
            "A": {"b"},
            "B": {"k"},
            "C": {"l"},
            "D": set("imnpstr"),
        },
        "MODES": 1,
        "NICKLEN": UNLIMITED,
        "MAXBANS": UNLIMITED,
        "TOPICLEN": UNLIMITED,
        "KICKLEN": UNLIMITED,
        "CHANNELLEN": UNLIMITED,
        "CHIDLEN": 5,
        "AWAYLEN": UNLIMITED,
        "MAXTARGETS": 1,
        "MAXCHANNELS": UNLIMITED,
        "CHANLIMIT": {"#": UNLIMITED},
        "STATUSMSG": {"@", "+"},
        "CASEMAPPING": "rfc1459",
        "ELIST": set(),
        "MONITOR": 0,
    }


def _to_limit(value: str) -> int | float | str:
    # An empty limit means "no limit"
    if not value:
        return UNLIMITED
    return int(value) if value.isdigit() else value


def _to_charset(value: str) -> set[str]:
    return set(value)


def _to_prefix(value: str) -> dict[str, str]:
    match = _PREFIX_VALUE.match(value)
    if match is None:
        return {}
    return dict(zip(match["modes"], match["prefixes"]))


def _to_chanmodes(value: str) -> dict[str, set[str]]:
    groups = value.split(",")
    groups += [""] * (4 - len(groups))
    return {cls: set(group) for cls, group in zip("ABCD", groups)}


def _to_prefixed_limits(value: str) -> dict[str, int | float]:
    limits: dict[str, int | float] = {}
    for pair in value.split(","):
        chars, _, num = pair.partition(":")
        limit = int(num) if num.isdigit() else UNLIMITED
        for char in chars:
            limits[char] = limit
    return limits


def _to_targmax(value: str) -> dict[str, int]:
    targets: dict[str, int] = {}
    for pair in value.split(","):
        if not pair:
            continue
        name, _, num = pair.partition(":")
        targets[name] = int(num) if num.isdigit() else 0
    return targets


_TRANSFORMS: tuple[tuple[frozenset[str], Callable[[str], ISupportValue]], ...] = (
    (
        frozenset(
            {
                "MODES",
                "MAXCHANNELS",
                "NICKLEN",
                "MAXBANS",
                "TOPICLEN",
                "KICKLEN",
                "CHANNELLEN",
                "CHIDLEN",
                "SILENCE",
                "AWAYLEN",
                "MAXTARGETS",
                "WATCH",
                "MONITOR",
            }
        ),
        _to_limit,
    ),
    (frozenset({"STATUSMSG", "ELIST", "CHANTYPES"}), _to_charset),
    (frozenset({"CASEMAPPING", "NETWORK"}), str),
    (frozenset({"PREFIX"}), _to_prefix),
    (frozenset({"CHANMODES"}), _to_chanmodes),
    (frozenset({"CHANLIMIT", "MAXLIST", "IDCHAN"}), _to_prefixed_limits),
    (frozenset({"TARGMAX"}), _to_targmax),
)


def transform_isupport(name: str, value: str) -> ISupportValue:
    """Apply the typed transform for ``name``, or keep the raw string."""
    for names, transform in _TRANSFORMS:
        if name in names:
            return transform(value)
    return value


def parse_isupport(tokens: Iterable[str]) -> dict[str, ISupportValue | None]:
    """Parse ``NAME``, ``NAME=VALUE`` and ``-NAME`` tokens.

    Bare names map to True. Negated names map to None, which
    :meth:`SessionState.merge_isupport` treats as "back to default".
    """
    isupport: dict[str, ISupportValue | None] = {}
    for token in tokens:
        if token.startswith(FEATURE_DISABLED_PREFIX):
            isupport[token[1:]] = None
            continue
        name, sep, value = token.partition("=")
        isupport[name] = transform_isupport(name, value) if sep else True
    return isupport


@dataclass
class SessionState:
    """ISUPPORT mapping and enabled capabilities of one connection.

    Not synchronized; share across threads only behind an external lock.
    """

    isupport: dict[str, ISupportValue] = field(default_factory=default_isupport)
    capabilities: set[str] = field(default_factory=set)

    @property
    def chantypes(self) -> set[str]:
        return self.isupport.get("CHANTYPES") or set()

    @property
    def casemapping(self) -> str:
        return self.isupport.get("CASEMAPPING", "rfc1459")

    def is_channel(self, target: str | None) -> bool:
        return bool(target) and target[0] in self.chantypes

    def has_capability(self, capability: str) -> bool:
        return capability in self.capabilities

    def merge_isupport(self, update: Mapping[str, ISupportValue | None]) -> None:
        """Overwrite the keys present in ``update``, leaving others untouched."""
        defaults = None
        for name, value in update.items():
            if value is None:
                if defaults is None:
                    defaults = default_isupport()
                if name in defaults:
                    self.isupport[name] = defaults[name]
                else:
                    self.isupport.pop(name, None)
            else:
                self.isupport[name] = value
        logger.log_event(
            "isupport", "merged", level=logging.DEBUG, keys=",".join(update)
        )

    def enable_capability(self, capability: str) -> None:
        self.capabilities.add(capability)
        logger.log_event("cap", "enabled", level=logging.DEBUG, capability=capability)

    def disable_capability(self, capability: str) -> None:
        self.capabilities.discard(capability)
        logger.log_event("cap", "disabled", level=logging.DEBUG, capability=capability)


__all__ = [
    "ISupportValue",
    "UNLIMITED",
    "SessionState",
    "default_isupport",
    "parse_isupport",
    "transform_isupport",
]
