"""Typed IRC message values.

Every message carries the header of the line it came from (``prefix``,
``command``, ``args``, ``tags``) plus the fields of its variant. Messages are
immutable but not hashable, since several fields are dicts. ``type`` is a
discriminator derived from the variant, the numeric code, the CTCP/DCC/CAP
subtype, or the notice/action flags of a chat message.
"""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field
from typing import ClassVar

from ..modes import ModeChange
from .isupport import ISupportValue
from .parser import TagValue


def _message(cls):
    cls = dataclass(frozen=True, kw_only=True)(cls)
    # Mapping fields (tags, users, isupport, capabilities) make messages unhashable
    cls.__hash__ = None
    return cls


@_message
class Message:
    """A message without a more specific variant."""

    TYPE: ClassVar[str | None] = None

    prefix: str | None = None
    command: str
    args: tuple[str, ...] = ()
    tags: dict[str, TagValue] = field(default_factory=dict)

    @property
    def type(self) -> str:
        return self.TYPE or self.command.lower()


@_message
class Numeric(Message):
    name: str | None = None
    is_error: bool = False

    @property
    def type(self) -> str:
        return self.command


@_message
class ISupport(Numeric):
    """RPL_ISUPPORT (005). ``isupport`` holds the typed values it announced."""

    isupport: dict[str, ISupportValue | None] = field(default_factory=dict)


@_message
class NamesReply(Numeric):
    """RPL_NAMREPLY (353). ``users`` maps each nickname to its status prefixes."""

    channel: str | None = None
    channel_type: str | None = None
    users: dict[str, list[str]] = field(default_factory=dict)


@_message
class WhoReply(Numeric):
    """RPL_WHOREPLY (352)."""

    target: str | None = None
    username: str | None = None
    hostname: str | None = None
    server: str | None = None
    nickname: str | None = None
    prefixes: list[str] = field(default_factory=list)
    away: bool = False
    hops: int | None = None
    realname: str | None = None


@_message
class DCC(Message):
    """A DCC request; subclasses carry the parsed arguments of known types."""

    sender: str | None = None
    dcc_type: str
    dcc_args: str = ""

    @property
    def type(self) -> str:
        return f"dcc_{self.dcc_type}"


@_message
class DCCChat(DCC):
    address: ipaddress.IPv4Address | str | None = None
    port: int | None = None


@_message
class DCCSend(DCC):
    filename: str | None = None
    address: ipaddress.IPv4Address | str | None = None
    port: int | None = None
    size: int | None = None


@_message
class DCCAccept(DCC):
    """DCC ACCEPT and DCC RESUME; ``dcc_type`` tells them apart."""

    filename: str | None = None
    port: int | None = None
    position: int | None = None


@_message
class Error(Message):
    error: str | None = None


@_message
class Invite(Message):
    inviter: str | None = None
    channel: str | None = None


@_message
class Join(Message):
    """``account`` and ``realname`` are only filled in with extended-join."""

    joiner: str | None = None
    channel: str | None = None
    account: str | None = None
    realname: str | None = None


@_message
class Part(Message):
    parter: str | None = None
    channel: str | None = None
    message: str | None = None


@_message
class Kick(Message):
    kicker: str | None = None
    channel: str | None = None
    kickee: str | None = None
    message: str | None = None


@_message
class UserModeChange(Message):
    TYPE: ClassVar[str] = "user_mode_change"

    mode_changes: tuple[ModeChange, ...] = ()


@_message
class ChannelModeChange(Message):
    TYPE: ClassVar[str] = "channel_mode_change"

    changer: str | None = None
    channel: str | None = None
    mode_changes: tuple[ModeChange, ...] = ()


@_message
class Nick(Message):
    changer: str | None = None
    nickname: str | None = None


@_message
class Topic(Message):
    changer: str | None = None
    channel: str | None = None
    topic: str | None = None


@_message
class Quit(Message):
    quitter: str | None = None
    message: str | None = None


@_message
class Ping(Message):
    message: str | None = None


@_message
class Cap(Message):
    """CAP LS, LIST and ACK replies.

    ``capabilities`` maps each capability to its modifiers
    (``"enable"``, ``"disable"``, ``"sticky"``) in the order given.
    """

    subcommand: str
    multipart: bool = False
    reply: str | None = None
    capabilities: dict[str, list[str]] = field(default_factory=dict)

    @property
    def type(self) -> str:
        return f"cap_{self.subcommand.lower()}"


@_message
class ServerNotice(Message):
    TYPE: ClassVar[str] = "server_notice"

    sender: str | None = None
    target: str | None = None
    message: str | None = None


@_message
class ChatMessage(Message):
    """PRIVMSG, NOTICE and CTCP ACTION.

    ``identified`` is None unless the identify-msg capability is enabled.
    """

    sender: str | None = None
    channel: str | None = None
    message: str | None = None
    is_notice: bool = False
    is_action: bool = False
    identified: bool | None = None

    @property
    def type(self) -> str:
        if self.is_action:
            return "ctcp_action"
        return "notice" if self.is_notice else "privmsg"


@_message
class CTCP(Message):
    """A CTCP request (PRIVMSG) or reply (NOTICE) other than ACTION."""

    sender: str | None = None
    channel: str | None = None
    ctcp_type: str
    ctcp_args: str = ""
    is_reply: bool = False

    @property
    def type(self) -> str:
        kind = "ctcpreply" if self.is_reply else "ctcp"
        return f"{kind}_{self.ctcp_type}"


__all__ = [
    "Message",
    "Numeric",
    "ISupport",
    "NamesReply",
    "WhoReply",
    "DCC",
    "DCCChat",
    "DCCSend",
    "DCCAccept",
    "Error",
    "Invite",
    "Join",
    "Part",
    "Kick",
    "UserModeChange",
    "ChannelModeChange",
    "Nick",
    "Topic",
    "Quit",
    "Ping",
    "Cap",
    "ServerNotice",
    "ChatMessage",
    "CTCP",
]
