"""IRC casemapping helpers.

Servers advertise one of three casemappings through ISUPPORT. Each is a
translation table over ASCII letters plus a few punctuation characters that
RFC 1459 treats as the lower/upper case forms of each other.
"""

from __future__ import annotations

import string

from .errors import UnsupportedCasemappingError

__all__ = ["CASEMAPPINGS", "irc_upcase", "irc_downcase", "irc_eql"]

_LOWER = string.ascii_lowercase
_UPPER = string.ascii_uppercase

# (lower, upper) character pairs for each casemapping
_MAPS: dict[str, tuple[str, str]] = {
    "ascii": (_LOWER, _UPPER),
    "rfc1459": (_LOWER + "{}^|", _UPPER + "[]~\\"),
    "strict-rfc1459": (_LOWER + "{}|", _UPPER + "[]\\"),
}

_UPCASE = {name: str.maketrans(lower, upper) for name, (lower, upper) in _MAPS.items()}
_DOWNCASE = {name: str.maketrans(upper, lower) for name, (lower, upper) in _MAPS.items()}

CASEMAPPINGS = frozenset(_MAPS)


def _table(tables: dict[str, dict[int, int]], casemapping: str) -> dict[int, int]:
    try:
        return tables[casemapping]
    except (KeyError, TypeError):
        raise UnsupportedCasemappingError(casemapping) from None


def irc_upcase(irc_string: str, casemapping: str = "rfc1459") -> str:
    """Return an upper case version of an IRC string under ``casemapping``."""
    return irc_string.translate(_table(_UPCASE, casemapping))


def irc_downcase(irc_string: str, casemapping: str = "rfc1459") -> str:
    """Return a lower case version of an IRC string under ``casemapping``."""
    return irc_string.translate(_table(_DOWNCASE, casemapping))


def irc_eql(first: str, second: str, casemapping: str = "rfc1459") -> bool:
    """True if the two strings differ only in case (or not at all)."""
    return irc_upcase(first, casemapping) == irc_upcase(second, casemapping)
