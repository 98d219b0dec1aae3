"""Hostmask matching and normalization.

Masks are ``nick!user@host`` patterns where ``*`` matches any run of
characters and ``?`` matches exactly one. Comparison is case-insensitive
under the server's casemapping.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from .case import irc_upcase
from .errors import UnsupportedMaskError

__all__ = ["matches_mask", "matches_mask_array", "normalize_mask"]

_MASK_WILDCARD = "[^\x00]*"
_MASK_OPTIONAL = "[^\x00]"
_STAR_RUN = re.compile(r"\*{2,}")


def _compile_mask(mask: str, casemapping: str) -> re.Pattern[str]:
    parts = []
    for char in irc_upcase(mask, casemapping):
        if char == "*":
            parts.append(_MASK_WILDCARD)
        elif char == "?":
            parts.append(_MASK_OPTIONAL)
        else:
            parts.append(re.escape(char))
    return re.compile("".join(parts))


def matches_mask(mask: str, candidate: str, casemapping: str = "rfc1459") -> bool:
    """Return True if ``candidate`` matches ``mask`` in full.

    Raises:
        UnsupportedMaskError: For extended bans (masks containing ``$``).
        UnsupportedCasemappingError: For an unknown casemapping.
    """
    if "$" in mask:
        raise UnsupportedMaskError(mask)
    pattern = _compile_mask(mask, casemapping)
    return pattern.fullmatch(irc_upcase(candidate, casemapping)) is not None


def matches_mask_array(
    masks: Iterable[str], candidates: Iterable[str], casemapping: str = "rfc1459"
) -> dict[str, list[str]]:
    """Match every candidate against every mask.

    Returns a mapping of each mask that matched to the list of candidates
    that matched it. Masks without any match are left out.
    """
    candidates = list(candidates)
    results: dict[str, list[str]] = {}
    for mask in masks:
        for candidate in candidates:
            if matches_mask(mask, candidate, casemapping):
                results.setdefault(mask, []).append(candidate)
    return results


def normalize_mask(mask: str) -> str:
    """Expand a partial mask into full ``nick!user@host`` form.

    Examples:
      'foo*'  -> 'foo*!*@*'
      '*@*'   -> '*!*@*'
      'a!b'   -> 'a!b@*'
    """
    mask = _STAR_RUN.sub("*", mask)

    if "!" not in mask and "@" in mask:
        nick, remainder = "*", mask
    else:
        nick, _, remainder = mask.partition("!")
        if "!" not in mask:
            remainder = None

    user = host = None
    if remainder is not None:
        remainder = remainder.replace("!", "")
        user, _, host = remainder.partition("@")
        host = host.replace("@", "")

    return f"{nick or '*'}!{user or '*'}@{host or '*'}"
