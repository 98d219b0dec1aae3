"""Classification of real IRC traffic into typed messages."""

from __future__ import annotations

import ipaddress
from collections.abc import Hashable
import logging

import pytest

from ircsupport.config import ParserConfig
from ircsupport.errors import NotIrcProtocolError, UnknownModeError
from ircsupport.irc.dispatcher import MessageParser, parse_cap_reply
from ircsupport.irc.models import (
    CTCP,
    DCC,
    Cap,
    ChannelModeChange,
    ChatMessage,
    DCCAccept,
    DCCChat,
    DCCSend,
    ISupport,
    Message,
    NamesReply,
    Numeric,
    ServerNotice,
    UserModeChange,
    WhoReply,
)
from ircsupport.modes import ModeChange

USER = "dsfdsfdsf!~hinrik@191-108-22-46.fiber.hringdu.is"
LITERAL = "literal!hinrik@w.nix.is"


@pytest.fixture
def parser():
    return MessageParser()


@pytest.fixture
def identified_parser():
    return MessageParser(ParserConfig(capabilities=["identify-msg"]))


def test_welcome_numeric(parser):
    msg = parser.parse(
        ":adams.freenode.net 001 dsfdsfdsf :Welcome to the freenode Internet Relay Chat Network dsfdsfdsf"
    )
    assert isinstance(msg, Numeric)
    assert msg.prefix == "adams.freenode.net"
    assert msg.command == "001"
    assert msg.args[0] == "dsfdsfdsf"
    assert msg.args[1] == "Welcome to the freenode Internet Relay Chat Network dsfdsfdsf"
    assert msg.type == "001"
    assert msg.name == "RPL_WELCOME"
    assert msg.is_error is False


def test_error_numeric(parser):
    msg = parser.parse(":srv 433 * nick :Nickname is already in use")
    assert msg.name == "ERR_NICKNAMEINUSE"
    assert msg.is_error is True


def test_unknown_numeric(parser):
    msg = parser.parse(":srv 999 nick :what")
    assert msg.name is None
    assert msg.is_error is False


class TestISupport:
    LINE_1 = (
        ":adams.freenode.net 005 dsfdsfdsf CHANTYPES=# EXCEPTS INVEX "
        "CHANMODES=eIbq,k,flj,CFLMPQcgimnprstz CHANLIMIT=#:120 PREFIX=(ov)@+ "
        "MAXLIST=bqeI:100 MODES=4 NETWORK=freenode KNOCK STATUSMSG=@+ CALLERID=g "
        ":are supported by this server"
    )
    LINE_2 = (
        ":adams.freenode.net 005 dsfdsfdsf CASEMAPPING=rfc1459 CHARSET=ascii NICKLEN=16 "
        "CHANNELLEN=50 TOPICLEN=390 ETRACE CPRIVMSG CNOTICE DEAF=D MONITOR=100 FNC "
        "TARGMAX=NAMES:1,LIST:1,KICK:1,WHOIS:1,PRIVMSG:4,NOTICE:4,ACCEPT:,MONITOR: "
        ":are supported by this server"
    )

    def test_first_line(self, parser):
        msg = parser.parse(self.LINE_1)
        assert isinstance(msg, ISupport)
        assert msg.args[1] == "CHANTYPES=#"
        assert msg.args[13] == "are supported by this server"
        assert msg.isupport["MODES"] == 4
        assert msg.isupport["STATUSMSG"] == {"@", "+"}
        assert msg.isupport["CHANTYPES"] == {"#"}
        assert msg.isupport["CHANMODES"] == {
            "A": set("eIbq"),
            "B": {"k"},
            "C": set("flj"),
            "D": set("CFLMPQcgimnprstz"),
        }
        assert msg.isupport["CHANLIMIT"] == {"#": 120}
        assert msg.isupport["PREFIX"] == {"o": "@", "v": "+"}
        assert msg.isupport["NETWORK"] == "freenode"
        assert msg.isupport["EXCEPTS"] is True
        # the target nick and trailing comment are not features
        assert "dsfdsfdsf" not in msg.isupport
        assert "are supported by this server" not in msg.isupport

    def test_updates_are_merged_into_state(self, parser):
        parser.parse(self.LINE_1)
        parser.parse(self.LINE_2)
        assert parser.isupport["MODES"] == 4
        assert parser.isupport["CASEMAPPING"] == "rfc1459"
        assert parser.isupport["NICKLEN"] == 16
        assert parser.isupport["TARGMAX"]["ACCEPT"] == 0
        assert parser.isupport["CHANMODES"]["C"] == set("flj")

    def test_line_without_trailing_comment(self, parser):
        msg = parser.parse(":srv 005 me MODES=4 NICKLEN=30")
        assert msg.isupport == {"MODES": 4, "NICKLEN": 30}
        assert parser.isupport["NICKLEN"] == 30

    def test_single_word_comment_is_not_a_feature(self, parser):
        msg = parser.parse(":srv 005 me MODES=4 :supported")
        assert msg.isupport == {"MODES": 4}

    def test_negated_feature(self, parser):
        parser.parse(self.LINE_1)
        parser.parse(":srv 005 me -EXCEPTS -MODES :are supported by this server")
        assert "EXCEPTS" not in parser.isupport
        assert parser.isupport["MODES"] == 1


def test_names_reply(parser):
    msg = parser.parse(":adams.freenode.net 353 dsfdsfdsf @ #foo4321 :dsfdsfdsf @literal")
    assert isinstance(msg, NamesReply)
    assert msg.channel == "#foo4321"
    assert msg.channel_type == "@"
    assert msg.users == {"dsfdsfdsf": [], "literal": ["@"]}


def test_names_reply_multi_prefix(parser):
    msg = parser.parse(":srv 353 me = #chan :@+alice +bob")
    assert msg.users == {"alice": ["@", "+"], "bob": ["+"]}


def test_who_reply(parser):
    msg = parser.parse(
        ":adams.freenode.net 352 dsfdsfdsf #foo4321 ~hinrik 191-108-22-46.fiber.hringdu.is "
        "adams.freenode.net dsfdsfdsf H :0 Hinrik Örn Sigurðsson"
    )
    assert isinstance(msg, WhoReply)
    assert msg.target == "#foo4321"
    assert msg.username == "~hinrik"
    assert msg.hostname == "191-108-22-46.fiber.hringdu.is"
    assert msg.server == "adams.freenode.net"
    assert msg.nickname == "dsfdsfdsf"
    assert msg.away is False
    assert msg.prefixes == []
    assert msg.hops == 0
    assert msg.realname == "Hinrik Örn Sigurðsson"


def test_who_reply_away_operator(parser):
    msg = parser.parse(":srv 352 me #c u h srv nick G@ :3 Real Name")
    assert msg.away is True
    assert msg.prefixes == ["@"]
    assert msg.hops == 3


class TestChatMessages:
    def test_privmsg(self, parser):
        msg = parser.parse(f":{LITERAL} PRIVMSG #foo4321 :dsfdsfsdfds")
        assert isinstance(msg, ChatMessage)
        assert msg.type == "privmsg"
        assert msg.sender == LITERAL
        assert msg.channel == "#foo4321"
        assert msg.message == "dsfdsfsdfds"
        assert msg.is_notice is False
        assert msg.is_action is False
        assert msg.identified is None

    def test_private_message_has_no_channel(self, parser):
        msg = parser.parse(f":{LITERAL} PRIVMSG dsfdsfdsf :hi")
        assert msg.channel is None

    def test_identified_notice(self, identified_parser):
        msg = identified_parser.parse(
            ":NickServ!NickServ@services. NOTICE dsfdsfdsf :+This nickname is registered."
        )
        assert msg.type == "notice"
        assert msg.is_notice is True
        assert msg.sender == "NickServ!NickServ@services."
        assert msg.identified is True
        assert msg.message == "This nickname is registered."

    def test_unidentified_privmsg(self, identified_parser):
        msg = identified_parser.parse(f":{LITERAL} PRIVMSG #foo4321 :-dsfdsfsdfds")
        assert msg.channel == "#foo4321"
        assert msg.identified is False
        assert msg.message == "dsfdsfsdfds"

    @pytest.mark.parametrize("marker,identified", [("-", False), ("+", True)])
    def test_identified_action(self, identified_parser, marker, identified):
        msg = identified_parser.parse(
            f":{LITERAL} PRIVMSG #foo4321 :\x01{marker}ACTION dsfdsfsdfds\x01"
        )
        assert msg.identified is identified
        assert msg.is_action is True
        assert msg.message == "dsfdsfsdfds"

    def test_action_without_identify_msg(self, parser):
        msg = parser.parse(f":{LITERAL} PRIVMSG #foo4321 :\x01ACTION waves\x01")
        assert isinstance(msg, ChatMessage)
        assert msg.is_action is True
        assert msg.identified is None
        assert msg.message == "waves"

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("PRIVMSG #x :hi", "privmsg"),
            ("NOTICE #x :hi", "notice"),
            ("PRIVMSG #x :\x01ACTION hi\x01", "ctcp_action"),
            ("NOTICE #x :\x01ACTION hi\x01", "ctcp_action"),
        ],
    )
    def test_type_tells_privmsg_notice_and_action_apart(self, parser, raw, expected):
        msg = parser.parse(f":{LITERAL} {raw}")
        assert isinstance(msg, ChatMessage)
        assert msg.type == expected


class TestCTCP:
    def test_ctcp_request(self, parser):
        msg = parser.parse(f":{LITERAL} PRIVMSG #foo4321 :\x01FOOBAR dsfdsfsdfds\x01")
        assert isinstance(msg, CTCP)
        assert msg.type == "ctcp_foobar"
        assert msg.ctcp_type == "foobar"
        assert msg.ctcp_args == "dsfdsfsdfds"
        assert msg.is_reply is False

    def test_ctcp_reply(self, parser):
        msg = parser.parse(f":{LITERAL} NOTICE #foo4321 :\x01FOOBAR dsfdsfsdfds\x01")
        assert msg.type == "ctcpreply_foobar"
        assert msg.ctcp_type == "foobar"
        assert msg.ctcp_args == "dsfdsfsdfds"

    def test_ctcp_without_arguments(self, parser):
        msg = parser.parse(f":{LITERAL} PRIVMSG nick :\x01VERSION\x01")
        assert msg.type == "ctcp_version"
        assert msg.ctcp_args == ""
        assert msg.channel is None

    def test_only_first_ctcp_is_used(self, parser):
        msg = parser.parse(f":{LITERAL} PRIVMSG nick :\x01VERSION\x01\x01TIME\x01")
        assert msg.type == "ctcp_version"

    def test_unbalanced_delimiters(self, parser):
        msg = parser.parse(f":{LITERAL} PRIVMSG #foo4321 :\x01ACTION jumps\x01foo\x01")
        assert msg.message == "jumps"

    def test_malformed_ctcp_is_logged(self, parser, caplog):
        msg = parser.parse(f":{LITERAL} PRIVMSG #foo4321 :\x01..,, dsfdsfsdfds\x01")
        assert msg is None
        assert f"Received malformed CTCP from {LITERAL}: ..,, dsfdsfsdfds" in caplog.text

    def test_malformed_dcc_is_logged(self, parser, caplog):
        msg = parser.parse(f":{LITERAL} PRIVMSG #foo4321 :\x01DCC ..,,\x01")
        assert msg is None
        assert f"Received malformed DCC request from {LITERAL}: DCC ..,," in caplog.text


class TestDCC:
    ADDRESS = ipaddress.IPv4Address(3232246293)

    def test_generic_dcc(self, parser):
        msg = parser.parse(f":{LITERAL} PRIVMSG #foo4321 :\x01DCC FOO dsfdsfsdfds\x01")
        assert type(msg) is DCC
        assert msg.type == "dcc_foo"
        assert msg.dcc_type == "foo"
        assert msg.sender == LITERAL
        assert msg.dcc_args == "dsfdsfsdfds"

    def test_chat(self, parser):
        msg = parser.parse(f":{LITERAL} PRIVMSG #foo4321 :\x01DCC CHAT dummy 3232246293 12345\x01")
        assert isinstance(msg, DCCChat)
        assert msg.type == "dcc_chat"
        assert msg.address == self.ADDRESS
        assert str(msg.address) == "192.168.42.21"
        assert msg.port == 12345

    def test_send(self, parser):
        msg = parser.parse(
            f":{LITERAL} PRIVMSG #foo4321 :\x01DCC SEND foobar.txt 3232246293 12345 5000\x01"
        )
        assert isinstance(msg, DCCSend)
        assert msg.filename == "foobar.txt"
        assert msg.address == self.ADDRESS
        assert msg.port == 12345
        assert msg.size == 5000

    def test_send_quoted_filename(self, parser):
        msg = parser.parse(
            f':{LITERAL} PRIVMSG #foo4321 :\x01DCC SEND "foo and bar.txt" 3232246293 12345 5000\x01'
        )
        assert msg.filename == "foo and bar.txt"
        assert msg.address == self.ADDRESS
        assert msg.port == 12345
        assert msg.size == 5000

    def test_send_without_size(self, parser):
        msg = parser.parse(f":{LITERAL} PRIVMSG nick :\x01DCC SEND a.txt 3232246293 12345\x01")
        assert msg.size is None

    def test_accept(self, parser):
        msg = parser.parse(
            f':{LITERAL} PRIVMSG #foo4321 :\x01DCC ACCEPT "foo and bar.txt" 12345 1000\x01'
        )
        assert isinstance(msg, DCCAccept)
        assert msg.type == "dcc_accept"
        assert msg.filename == "foo and bar.txt"
        assert msg.port == 12345
        assert msg.position == 1000

    def test_resume(self, parser):
        msg = parser.parse(f":{LITERAL} PRIVMSG nick :\x01DCC RESUME file.txt 12345 200\x01")
        assert isinstance(msg, DCCAccept)
        assert msg.type == "dcc_resume"
        assert msg.position == 200


class TestChannelEvents:
    def test_join(self, parser):
        msg = parser.parse(f":{USER} JOIN #foo4321")
        assert msg.type == "join"
        assert msg.joiner == USER
        assert msg.channel == "#foo4321"
        assert msg.account is None

    def test_extended_join(self):
        parser = MessageParser(ParserConfig(capabilities=["extended-join"]))
        msg = parser.parse(f":{USER} JOIN #foo4321 hinrik :Hinrik Sigurdsson")
        assert msg.account == "hinrik"
        assert msg.realname == "Hinrik Sigurdsson"
        msg = parser.parse(f":{USER} JOIN #foo4321 * :Anon")
        assert msg.account is None

    @pytest.mark.parametrize(
        "suffix,expected", [("", None), (" :", None), (" :bye!", "bye!")]
    )
    def test_part(self, parser, suffix, expected):
        msg = parser.parse(f":{USER} PART #foo4321{suffix}")
        assert msg.parter == USER
        assert msg.channel == "#foo4321"
        assert msg.message == expected

    @pytest.mark.parametrize(
        "suffix,expected", [("", None), (" :", None), (" :bye!", "bye!")]
    )
    def test_kick(self, parser, suffix, expected):
        msg = parser.parse(f":{USER} KICK #foo4321 boring_person{suffix}")
        assert msg.kicker == USER
        assert msg.kickee == "boring_person"
        assert msg.message == expected

    def test_invite(self, parser):
        msg = parser.parse(f":{LITERAL} INVITE dsfdsfdsf :#foo4321")
        assert msg.inviter == LITERAL
        assert msg.channel == "#foo4321"

    def test_nick(self, parser):
        msg = parser.parse(f":{USER} NICK new_name")
        assert msg.changer == USER
        assert msg.nickname == "new_name"

    @pytest.mark.parametrize(
        "suffix,expected", [("", None), (" :", None), (" :fooo", "fooo")]
    )
    def test_topic(self, parser, suffix, expected):
        msg = parser.parse(f":{USER} TOPIC #foo4321{suffix}")
        assert msg.changer == USER
        assert msg.channel == "#foo4321"
        assert msg.topic == expected

    @pytest.mark.parametrize(
        "suffix,expected", [("", None), (" :", None), (" :gone", "gone")]
    )
    def test_quit(self, parser, suffix, expected):
        msg = parser.parse(f":{USER} QUIT{suffix}")
        assert msg.quitter == USER
        assert msg.message == expected

    @pytest.mark.parametrize(
        "suffix,expected", [("", None), (" :", None), (" :123", "123")]
    )
    def test_ping(self, parser, suffix, expected):
        assert parser.parse(f":{USER} PING{suffix}").message == expected


class TestServerNotice:
    def test_without_prefix(self, parser):
        msg = parser.parse("NOTICE :foo bar")
        assert isinstance(msg, ServerNotice)
        assert msg.type == "server_notice"
        assert msg.sender is None
        assert msg.target is None
        assert msg.message == "foo bar"

    def test_with_target(self, parser):
        msg = parser.parse(":fooserver NOTICE AUTH :foo bar")
        assert msg.type == "server_notice"
        assert msg.sender == "fooserver"
        assert msg.target == "AUTH"
        assert msg.message == "foo bar"

    def test_service_without_target(self, parser):
        msg = parser.parse(":foo-service NOTICE :foo bar")
        assert msg.type == "server_notice"
        assert msg.sender == "foo-service"
        assert msg.message == "foo bar"


class TestCap:
    def test_ls(self, parser):
        msg = parser.parse("CAP LS :foo -bar ~baz ~=quux")
        assert isinstance(msg, Cap)
        assert msg.multipart is False
        assert msg.type == "cap_ls"
        assert msg.subcommand == "LS"
        assert msg.reply == "foo -bar ~baz ~=quux"
        assert msg.capabilities == {
            "foo": ["enable"],
            "bar": ["disable"],
            "baz": ["enable"],
            "quux": ["enable", "sticky"],
        }
        # LS never changes the enabled set
        assert parser.capabilities == set()

    def test_multipart(self, parser):
        msg = parser.parse("CAP LS * :foo -bar ~baz ~=quux")
        assert msg.multipart is True
        assert msg.reply == "foo -bar ~baz ~=quux"

    def test_ack_enables_and_disables(self, parser):
        msg = parser.parse("CAP ACK :identify-msg")
        assert msg.capabilities == {"identify-msg": ["enable"]}
        assert "identify-msg" in parser.capabilities
        msg = parser.parse("CAP ACK :-identify-msg")
        assert msg.capabilities == {"identify-msg": ["disable"]}
        assert "identify-msg" not in parser.capabilities

    def test_ack_affects_later_messages(self, parser):
        parser.parse("CAP ACK :identify-msg")
        msg = parser.parse(f":{LITERAL} PRIVMSG #foo4321 :+hello")
        assert msg.identified is True
        assert msg.message == "hello"

    def test_other_subcommand_is_generic(self, parser):
        msg = parser.parse("CAP NAK :sasl")
        assert type(msg) is Message
        assert msg.type == "cap"

    def test_parse_cap_reply(self):
        assert parse_cap_reply(None) == {}
        assert parse_cap_reply("=sasl") == {"sasl": ["sticky"]}


class TestModes:
    def test_user_mode_short_form(self, parser):
        msg = parser.parse(f":{USER} MODE +i")
        assert isinstance(msg, UserModeChange)
        assert msg.type == "user_mode_change"
        assert msg.mode_changes == (ModeChange(mode="i", set=True),)

    def test_user_mode_with_target(self, parser):
        msg = parser.parse(":dsfdsfdsf MODE dsfdsfdsf :+iw-x")
        assert [(c.mode, c.set) for c in msg.mode_changes] == [
            ("i", True),
            ("w", True),
            ("x", False),
        ]

    def test_channel_mode(self, parser):
        parser.parse(TestISupport.LINE_1)
        msg = parser.parse(f":{USER} MODE #foo4321 +tlk 300 foo")
        assert isinstance(msg, ChannelModeChange)
        assert msg.type == "channel_mode_change"
        assert msg.changer == USER
        assert msg.channel == "#foo4321"
        assert msg.mode_changes == (
            ModeChange(mode="t", set=True),
            ModeChange(mode="l", set=True, argument=300),
            ModeChange(mode="k", set=True, argument="foo"),
        )

    def test_channel_mode_uses_prefix_modes(self, parser):
        parser.parse(":srv 005 me PREFIX=(qaohv)~&@%+ :are supported by this server")
        msg = parser.parse(f":{USER} MODE #foo +qh alice bob")
        assert [c.argument for c in msg.mode_changes] == ["alice", "bob"]

    def test_unknown_channel_mode(self, parser):
        with pytest.raises(UnknownModeError):
            parser.parse(f":{USER} MODE #foo4321 +Z")


def test_error_message(parser):
    msg = parser.parse("ERROR :Closing Link: 191-108-22-46.fiber.hringdu.is (Client Quit)")
    assert msg.type == "error"
    assert msg.error == "Closing Link: 191-108-22-46.fiber.hringdu.is (Client Quit)"


def test_generic_message(parser):
    msg = parser.parse("FOO BAR :baz")
    assert type(msg) is Message
    assert msg.type == "foo"
    assert msg.prefix is None
    assert msg.args == ("BAR", "baz")


def test_tags_are_carried(parser):
    msg = parser.parse("@time=2012-01-01T00:00:00Z :n!u@h PRIVMSG #c :hi")
    assert msg.tags == {"time": "2012-01-01T00:00:00Z"}


def test_messages_are_immutable(parser):
    msg = parser.parse("FOO BAR :baz")
    with pytest.raises(AttributeError):
        msg.command = "BAR"  # type: ignore[misc]



def test_messages_are_not_hashable(parser):
    msg = parser.parse("PING :x")
    assert not isinstance(msg, Hashable)
    with pytest.raises(TypeError):
        hash(msg)
    # value equality still holds
    assert msg == parser.parse("PING :x")


def test_not_irc_protocol(parser, caplog):
    caplog.set_level(logging.DEBUG, logger="ircsupport")
    with pytest.raises(NotIrcProtocolError):
        parser.parse("+")
    assert "parser_line_rejected" in caplog.text


def test_parse_bytes(parser):
    msg = parser.parse(b":n!u@h PRIVMSG #c :l\xc3\xba\xc3\xb0i\r\n")
    assert msg.message == "lúði"


def test_config_seeds_isupport():
    parser = MessageParser(ParserConfig(isupport={"CHANTYPES": "#&", "EXCEPTS": True}))
    assert parser.isupport["CHANTYPES"] == {"#", "&"}
    assert parser.isupport["EXCEPTS"] is True
    msg = parser.parse(":n!u@h PRIVMSG &local :hi")
    assert msg.channel == "&local"


def test_config_false_negates_feature():
    parser = MessageParser(ParserConfig(isupport={"MODES": False, "EXCEPTS": False}))
    assert parser.isupport["MODES"] == 1
    assert "EXCEPTS" not in parser.isupport


def test_parser_compose_and_quote(parser):
    line = parser.decompose(":n!u@h PRIVMSG #c :hello world")
    assert parser.compose(line) == ":n!u@h PRIVMSG #c :hello world"
    assert parser.ctcp_quote("ACTION", "dances") == "\x01ACTION dances\x01"
