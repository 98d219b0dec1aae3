"""Nickname and channel name predicates."""

from __future__ import annotations

import re
from collections.abc import Iterable

__all__ = ["valid_nickname", "valid_channel_name"]

_NICKNAME = re.compile(r"[A-Za-z_`\-^|\\{}\[\]][A-Za-z_0-9`\-^|\\{}\[\]]*")
_CHANNEL_BODY = "[^\x00\x07\x0a\x0d ,:]+"
MAX_CHANNEL_BYTES = 200


def valid_nickname(nickname: str) -> bool:
    return _NICKNAME.fullmatch(nickname) is not None


def valid_channel_name(channel: str, chantypes: Iterable[str] = ("#", "&")) -> bool:
    """True if ``channel`` starts with one of ``chantypes`` and is well formed."""
    if len(channel.encode("utf-8")) > MAX_CHANNEL_BYTES:
        return False
    prefixes = "".join(chantypes)
    if not prefixes:
        return False
    pattern = f"[{re.escape(prefixes)}]{_CHANNEL_BODY}"
    return re.fullmatch(pattern, channel) is not None
