"""Message classification & extraction.

``MessageParser`` turns raw lines into typed messages. It owns the
``SessionState`` of one connection and updates it from RPL_ISUPPORT and
CAP ACK messages as they are parsed.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from typing import Any

from ..config.model import ParserConfig
from ..logs.logger import logger
from ..modes import parse_channel_modes, parse_modes
from ..numerics import numeric_to_name
from . import ctcp
from .isupport import SessionState, parse_isupport
from .models import (
    CTCP,
    DCC,
    Cap,
    ChannelModeChange,
    ChatMessage,
    DCCAccept,
    DCCChat,
    DCCSend,
    Error,
    Invite,
    ISupport,
    Join,
    Kick,
    Message,
    NamesReply,
    Nick,
    Numeric,
    Part,
    Ping,
    Quit,
    ServerNotice,
    Topic,
    UserModeChange,
    WhoReply,
)
from .parser import Line, compose, decompose

Extractor = Callable[[Line, SessionState], Message]

_NUMERIC = re.compile(r"\A[0-9]{3}\Z")
_CTCP_PAYLOAD = re.compile(r"(?P<name>\w+)(?: (?P<rest>.*))?", re.DOTALL)
_DCC_PAYLOAD = re.compile(r"(?P<name>\w+) +(?P<rest>.+)", re.DOTALL)
_CAP_TOKEN = re.compile(r"\A(?P<mods>[-=~]*)(?P<name>.*)\Z", re.DOTALL)
_CAP_MODIFIERS = {"-": "disable", "~": "enable", "=": "sticky"}
_NAMES_CHANNEL_TYPES = ("@", "=", "*")
_WHO_AWAY_FLAG = re.compile(r"[GH]")
_ISUPPORT_TOKEN = re.compile(r"\A-?[A-Z0-9]+(?:=\S*)?\Z")

IDENTIFY_MSG = "identify-msg"
EXTENDED_JOIN = "extended-join"


def _arg(args: Sequence[str], idx: int) -> str | None:
    return args[idx] if len(args) > idx else None


def _optional(value: str | None) -> str | None:
    # Empty trailing arguments count as absent
    return value or None


def _header(line: Line) -> dict[str, Any]:
    return {
        "prefix": line.prefix,
        "command": line.command,
        "args": tuple(line.args),
        "tags": dict(line.tags),
    }


def _channel_of(target: str | None, state: SessionState) -> str | None:
    if not state.is_channel(target):
        return None
    # broadcast messages are so 90s
    return target.split(",", 1)[0]


def _split_identified(
    text: str | None, state: SessionState
) -> tuple[bool | None, str | None]:
    if not state.has_capability(IDENTIFY_MSG) or text is None:
        return None, text
    return text[:1] == "+", text[1:]


# Numerics


def _numeric_fields(line: Line) -> dict[str, Any]:
    name = numeric_to_name(line.command)
    return {
        **_header(line),
        "name": name,
        "is_error": bool(name and name.startswith("ERR")),
    }


def _extract_numeric(line: Line, state: SessionState) -> Message:
    return Numeric(**_numeric_fields(line))


def _extract_isupport(line: Line, state: SessionState) -> Message:
    # Skip the target nickname and the trailing human-readable comment, if sent
    tokens = list(line.args[1:])
    if tokens and not _ISUPPORT_TOKEN.match(tokens[-1]):
        tokens.pop()
    return ISupport(**_numeric_fields(line), isupport=parse_isupport(tokens))


def _extract_names_reply(line: Line, state: SessionState) -> Message:
    data = list(line.args[1:])
    channel_type = None
    if data and data[0] in _NAMES_CHANNEL_TYPES:
        channel_type = data.pop(0)
    channel = _arg(data, 0)

    prefix_chars = set(state.isupport.get("PREFIX", {}).values())
    users: dict[str, list[str]] = {}
    for user in (_arg(data, 1) or "").split():
        idx = 0
        while idx < len(user) and user[idx] in prefix_chars:
            idx += 1
        users[user[idx:]] = list(user[:idx])

    return NamesReply(
        **_numeric_fields(line), channel=channel, channel_type=channel_type, users=users
    )


def _extract_who_reply(line: Line, state: SessionState) -> Message:
    fields = list(line.args[1:8])
    fields += [None] * (7 - len(fields))
    target, username, hostname, server, nickname, status, rest = fields

    away = False
    prefixes: list[str] = []
    if status:
        flag = _WHO_AWAY_FLAG.search(status)
        if flag:
            away = flag[0] == "G"
            status = status[: flag.start()] + status[flag.end() :]
        prefixes = list(status)

    hops = realname = None
    if rest:
        hops_text, _, realname = rest.partition(" ")
        hops = int(hops_text) if hops_text.isdigit() else None
        realname = realname or None

    return WhoReply(
        **_numeric_fields(line),
        target=target,
        username=username,
        hostname=hostname,
        server=server,
        nickname=nickname,
        prefixes=prefixes,
        away=away,
        hops=hops,
        realname=realname,
    )


_NUMERIC_EXTRACTORS: dict[str, Extractor] = {
    "005": _extract_isupport,
    "352": _extract_who_reply,
    "353": _extract_names_reply,
}


# Named commands


def _extract_error(line: Line, state: SessionState) -> Message:
    return Error(**_header(line), error=_arg(line.args, 0))


def _extract_invite(line: Line, state: SessionState) -> Message:
    return Invite(**_header(line), inviter=line.prefix, channel=_arg(line.args, 1))


def _extract_join(line: Line, state: SessionState) -> Message:
    account = realname = None
    if state.has_capability(EXTENDED_JOIN):
        account = _arg(line.args, 1)
        if account == "*":
            account = None
        realname = _arg(line.args, 2)
    return Join(
        **_header(line),
        joiner=line.prefix,
        channel=_arg(line.args, 0),
        account=account,
        realname=realname,
    )


def _extract_part(line: Line, state: SessionState) -> Message:
    return Part(
        **_header(line),
        parter=line.prefix,
        channel=_arg(line.args, 0),
        message=_optional(_arg(line.args, 1)),
    )


def _extract_kick(line: Line, state: SessionState) -> Message:
    return Kick(
        **_header(line),
        kicker=line.prefix,
        channel=_arg(line.args, 0),
        kickee=_arg(line.args, 1),
        message=_optional(_arg(line.args, 2)),
    )


def _extract_nick(line: Line, state: SessionState) -> Message:
    return Nick(**_header(line), changer=line.prefix, nickname=_arg(line.args, 0))


def _extract_topic(line: Line, state: SessionState) -> Message:
    return Topic(
        **_header(line),
        changer=line.prefix,
        channel=_arg(line.args, 0),
        topic=_optional(_arg(line.args, 1)),
    )


def _extract_quit(line: Line, state: SessionState) -> Message:
    return Quit(
        **_header(line), quitter=line.prefix, message=_optional(_arg(line.args, 0))
    )


def _extract_ping(line: Line, state: SessionState) -> Message:
    return Ping(**_header(line), message=_optional(_arg(line.args, 0)))


def _extract_generic(line: Line, state: SessionState) -> Message:
    return Message(**_header(line))


_COMMAND_EXTRACTORS: dict[str, Extractor] = {
    "ERROR": _extract_error,
    "INVITE": _extract_invite,
    "JOIN": _extract_join,
    "PART": _extract_part,
    "KICK": _extract_kick,
    "NICK": _extract_nick,
    "TOPIC": _extract_topic,
    "QUIT": _extract_quit,
    "PING": _extract_ping,
}


# MODE, NOTICE, PRIVMSG and CAP


def _extract_user_mode_change(line: Line, state: SessionState) -> Message:
    # "MODE nick :+i" from servers, "MODE +i" in the short form
    modes = " ".join(line.args[1:]) if len(line.args) > 1 else _arg(line.args, 0) or ""
    return UserModeChange(**_header(line), mode_changes=tuple(parse_modes(modes)))


def _extract_channel_mode_change(line: Line, state: SessionState) -> Message:
    mode_changes = parse_channel_modes(
        line.args[1:],
        chanmodes=state.isupport.get("CHANMODES"),
        statmodes=set(state.isupport.get("PREFIX", {})),
    )
    return ChannelModeChange(
        **_header(line),
        changer=line.prefix,
        channel=_arg(line.args, 0),
        mode_changes=tuple(mode_changes),
    )


def _extract_server_notice(line: Line, state: SessionState) -> Message:
    target = None
    if len(line.args) >= 2:
        target, message = line.args[0], line.args[-1]
    else:
        message = _arg(line.args, 0)
    return ServerNotice(**_header(line), sender=line.prefix, target=target, message=message)


def _extract_chat_message(line: Line, state: SessionState) -> Message:
    identified, message = _split_identified(_arg(line.args, 1), state)
    return ChatMessage(
        **_header(line),
        sender=line.prefix,
        channel=_channel_of(_arg(line.args, 0), state),
        message=message,
        is_notice=line.command == "NOTICE",
        identified=identified,
    )


def parse_cap_reply(reply: str | None) -> dict[str, list[str]]:
    """Parse a CAP reply into capability -> modifiers.

    A token without modifier prefix implies ``enable``.
    """
    capabilities: dict[str, list[str]] = {}
    for chunk in (reply or "").split():
        match = _CAP_TOKEN.match(chunk)
        mods, capability = match["mods"], match["name"]
        modifiers = [_CAP_MODIFIERS[mod] for mod in mods]
        if not mods:
            modifiers.append("enable")
        capabilities[capability] = modifiers
    return capabilities


def _extract_cap(line: Line, state: SessionState) -> Message:
    multipart = _arg(line.args, 1) == "*"
    reply = _arg(line.args, 2 if multipart else 1)
    return Cap(
        **_header(line),
        subcommand=line.args[0],
        multipart=multipart,
        reply=reply,
        capabilities=parse_cap_reply(reply),
    )


_CAP_SUBCOMMANDS = frozenset({"LS", "LIST", "ACK"})


# DCC


def _extract_dcc_chat(fields: dict[str, Any]) -> DCC:
    match = ctcp.DCC_CHAT_ARGS.match(fields["dcc_args"])
    if match is None:
        return DCCChat(**fields)
    return DCCChat(
        **fields, address=ctcp.dcc_address(match["address"]), port=int(match["port"])
    )


def _extract_dcc_send(fields: dict[str, Any]) -> DCC:
    match = ctcp.DCC_SEND_ARGS.match(fields["dcc_args"])
    if match is None:
        return DCCSend(**fields)
    return DCCSend(
        **fields,
        filename=ctcp.dcc_filename(match["filename"]),
        address=ctcp.dcc_address(match["address"]),
        port=int(match["port"]),
        size=int(match["size"]) if match["size"] else None,
    )


def _extract_dcc_accept(fields: dict[str, Any]) -> DCC:
    match = ctcp.DCC_ACCEPT_ARGS.match(fields["dcc_args"])
    if match is None:
        return DCCAccept(**fields)
    return DCCAccept(
        **fields,
        filename=ctcp.dcc_filename(match["filename"]),
        port=int(match["port"]),
        position=int(match["position"]),
    )


_DCC_EXTRACTORS: dict[str, Callable[[dict[str, Any]], DCC]] = {
    "CHAT": _extract_dcc_chat,
    "SEND": _extract_dcc_send,
    "ACCEPT": _extract_dcc_accept,
    "RESUME": _extract_dcc_accept,
}


def _config_token(name: str, value: str | bool) -> str:
    if value is True:
        return name
    if value is False:
        return f"-{name}"
    return f"{name}={value}"

class MessageParser:
    """Stateful IRC message parser for one connection.

    The parser is seeded with default ISUPPORT values and an empty capability
    set (or with what ``config`` specifies) and keeps them up to date from
    RPL_ISUPPORT and CAP ACK. Callers may read :attr:`isupport` and
    :attr:`capabilities` but should not modify them.
    """

    def __init__(self, config: ParserConfig | None = None):
        self.config = config or ParserConfig()
        self.state = SessionState()
        if self.config.isupport:
            tokens = [_config_token(name, value) for name, value in self.config.isupport.items()]
            self.state.merge_isupport(parse_isupport(tokens))
        for capability in self.config.capabilities:
            self.state.enable_capability(capability)

    @property
    def isupport(self) -> dict:
        return self.state.isupport

    @property
    def capabilities(self) -> set[str]:
        return self.state.capabilities

    def decompose(self, raw_line: str | bytes) -> Line:
        return decompose(raw_line, self.config.encoding)

    def compose(self, line: Line) -> str:
        return compose(line)

    def ctcp_quote(self, ctcp_type: str, message: str | None = None) -> str:
        return ctcp.ctcp_quote(ctcp_type, message)

    def parse(self, raw_line: str | bytes) -> Message | None:
        """Parse an IRC protocol line into a complete message object.

        Returns None for a malformed CTCP or DCC payload, which is logged
        but not raised.

        Raises:
            NotIrcProtocolError: If the line does not match the IRC grammar.
            UnknownModeError: If a channel mode change uses an unknown mode.
        """
        line = self.decompose(raw_line)

        if (
            line.command in ("PRIVMSG", "NOTICE")
            and ctcp.DELIMITER in (_arg(line.args, 1) or "")
        ):
            return self._handle_ctcp_message(line)

        return self.classify(line)

    def classify(self, line: Line) -> Message:
        """Select the message variant for ``line`` and extract its fields."""
        extractor = self._select_extractor(line)
        message = extractor(line, self.state)
        self._apply_side_effects(message)
        return message

    def _select_extractor(self, line: Line) -> Extractor:
        command = line.command
        if _NUMERIC.match(command):
            return _NUMERIC_EXTRACTORS.get(command, _extract_numeric)
        if command == "MODE":
            if self.state.is_channel(_arg(line.args, 0)):
                return _extract_channel_mode_change
            return _extract_user_mode_change
        if command == "NOTICE" and (not line.prefix or "!" not in line.prefix):
            return _extract_server_notice
        if command in ("PRIVMSG", "NOTICE"):
            return _extract_chat_message
        if command == "CAP" and _arg(line.args, 0) in _CAP_SUBCOMMANDS:
            return _extract_cap
        return _COMMAND_EXTRACTORS.get(command, _extract_generic)

    def _apply_side_effects(self, message: Message) -> None:
        if isinstance(message, ISupport):
            self.state.merge_isupport(message.isupport)
        elif isinstance(message, Cap) and message.type == "cap_ack":
            for capability, modifiers in message.capabilities.items():
                for modifier in modifiers:
                    if modifier == "disable":
                        self.state.disable_capability(capability)
                    elif modifier == "enable":
                        self.state.enable_capability(capability)

    def _handle_ctcp_message(self, line: Line) -> Message | None:
        ctcps, _texts = ctcp.ctcp_dequote(line.args[1])
        if not ctcps:
            return self.classify(line)

        # We only process the first CTCP, ignoring extra CTCPs and any
        # non-CTCPs. Those who send anything in addition to that first CTCP
        # are probably up to no good (e.g. trying to flood a bot by having it
        # reply to 20 CTCP VERSIONs at a time).
        payload = ctcps[0]

        identified = None
        if self.state.has_capability(IDENTIFY_MSG):
            identified = payload[:1] == "+"
            if payload[:1] in ("+", "-"):
                payload = payload[1:]

        match = _CTCP_PAYLOAD.match(payload)
        if match is None:
            logger.log_event(
                "ctcp", "malformed", level=logging.WARNING, sender=line.prefix, payload=payload
            )
            return None
        name, rest = match["name"], match["rest"]
        is_notice = line.command == "NOTICE"
        channel = _channel_of(line.args[0], self.state)

        if name == "ACTION":
            return ChatMessage(
                **_header(line),
                sender=line.prefix,
                channel=channel,
                message=rest or "",
                is_notice=is_notice,
                is_action=True,
                identified=identified,
            )

        if name == "DCC":
            return self._handle_dcc(line, payload, rest or "")

        return CTCP(
            **_header(line),
            sender=line.prefix,
            channel=channel,
            ctcp_type=name.lower(),
            ctcp_args=rest or "",
            is_reply=is_notice,
        )

    def _handle_dcc(self, line: Line, payload: str, dcc_payload: str) -> DCC | None:
        match = _DCC_PAYLOAD.match(dcc_payload)
        if match is None:
            logger.log_event(
                "dcc", "malformed", level=logging.WARNING, sender=line.prefix, payload=payload
            )
            return None
        dcc_name = match["name"].upper()
        fields = {
            **_header(line),
            "sender": line.prefix,
            "dcc_type": dcc_name.lower(),
            "dcc_args": match["rest"],
        }
        extractor = _DCC_EXTRACTORS.get(dcc_name)
        if extractor is None:
            return DCC(**fields)
        return extractor(fields)


__all__ = ["MessageParser", "parse_cap_reply", "IDENTIFY_MSG", "EXTENDED_JOIN"]
