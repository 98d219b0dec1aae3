"""Mode string parsing, condensing and diffing."""

from __future__ import annotations

import re
from collections.abc import Collection, Iterable, Mapping, Sequence
from dataclasses import dataclass

from .errors import UnknownModeError

__all__ = [
    "DEFAULT_CHANMODES",
    "DEFAULT_STATMODES",
    "ModeChange",
    "parse_modes",
    "parse_channel_modes",
    "condense_modes",
    "diff_modes",
]

ModeClassTable = Mapping[str, Collection[str]]

DEFAULT_CHANMODES: ModeClassTable = {
    "A": frozenset("beI"),
    "B": frozenset("k"),
    "C": frozenset("l"),
    "D": frozenset("imnpstaqr"),
}
DEFAULT_STATMODES: Collection[str] = frozenset("ohv")

_MODE_GROUP = re.compile(r"[-+]\w+", re.ASCII)
_TRAILING_SIGN = re.compile(r"[-+]\Z")


@dataclass(frozen=True, slots=True)
class ModeChange:
    """A single mode being set or unset, with its argument if it takes one."""

    mode: str
    set: bool
    argument: int | str | None = None


def parse_modes(modes: str) -> list[ModeChange]:
    """Split a mode string like ``+i-m`` into individual changes.

    A sign applies to every letter after it until the next sign.
    """
    mode_changes = []
    for group in _MODE_GROUP.findall(modes):
        is_set = group[0] == "+"
        mode_changes.extend(ModeChange(mode=mode, set=is_set) for mode in group[1:])
    return mode_changes


def _limit_argument(value: str | None) -> int | str | None:
    if value is None:
        return None
    return int(value) if value.isdigit() else value


def parse_channel_modes(
    modeparts: Sequence[str] | str,
    chanmodes: ModeClassTable | None = None,
    statmodes: Collection[str] | None = None,
) -> list[ModeChange]:
    """Parse a channel mode change with its arguments.

    Args:
        modeparts: The mode string followed by its positional arguments,
            e.g. ``["+ov-l", "alice", "bob"]``.
        chanmodes: The CHANMODES classes (``A``..``D``). Classes A and B
            always take an argument, class C takes a numeric argument when
            being set, class D never takes one.
        statmodes: Status modes (the PREFIX keys), which always take a
            nickname argument.

    Raises:
        UnknownModeError: If a mode letter belongs to no class.
    """
    if isinstance(modeparts, str):
        modeparts = [modeparts]
    if chanmodes is None:
        chanmodes = DEFAULT_CHANMODES
    if statmodes is None:
        statmodes = DEFAULT_STATMODES

    class_a = chanmodes.get("A", ())
    class_b = chanmodes.get("B", ())
    class_c = chanmodes.get("C", ())
    class_d = chanmodes.get("D", ())

    modes, *rest = modeparts or [""]
    args = iter(rest)
    mode_changes = []
    for change in parse_modes(modes):
        mode = change.mode
        if mode in class_a or mode in class_b or mode in statmodes:
            mode_changes.append(
                ModeChange(mode=mode, set=change.set, argument=next(args, None))
            )
        elif mode in class_c:
            argument = _limit_argument(next(args, None)) if change.set else None
            mode_changes.append(ModeChange(mode=mode, set=change.set, argument=argument))
        elif mode in class_d:
            mode_changes.append(change)
        else:
            raise UnknownModeError(mode)
    return mode_changes


def condense_modes(modes: str) -> str:
    """Remove redundant signs from a mode string.

    ``+o-v-o-o+v-o+o+o`` becomes ``+o-voo+v-o+oo``.
    """
    action = None
    result = []
    for char in modes:
        if char in "+-":
            if char != action:
                result.append(char)
                action = char
            continue
        result.append(char)
    return _TRAILING_SIGN.sub("", "".join(result))


def diff_modes(before: Iterable[str], after: Iterable[str]) -> str:
    """Return the mode string that turns ``before`` into ``after``."""
    before_modes = list(before)
    after_modes = list(after)
    removed = [m for m in before_modes if m not in after_modes]
    added = [m for m in after_modes if m not in before_modes]
    result = "".join("-" + m for m in removed) + "".join("+" + m for m in added)
    return condense_modes(result)
