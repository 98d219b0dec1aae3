#!/usr/bin/env python3
"""
Command-line decoder: read raw IRC lines and print them as JSON messages.
"""

from __future__ import annotations

import argparse
import dataclasses
import ipaddress
import json
import logging
import math
import sys
from collections.abc import Iterable
from typing import BinaryIO, TextIO

from .config import load_config
from .errors import IRCSupportError
from .errors.handling import log_error
from .irc.dispatcher import MessageParser
from .irc.models import Message
from .logging_config import LoggerConfigurator
from .logs.logger import logger


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ircsupport-decode",
        description="Decode raw IRC protocol lines into JSON messages.",
    )
    parser.add_argument("files", nargs="*", help="files to read (default: stdin)")
    parser.add_argument("--config", help="JSON file with parser settings")
    parser.add_argument("--encoding", help="override the configured line encoding")
    return parser


def _jsonable(value: object) -> object:
    if isinstance(value, dict):
        return {str(k): _jsonable(v) for k, v in value.items()}
    if isinstance(value, list | tuple):
        return [_jsonable(v) for v in value]
    if isinstance(value, set | frozenset):
        return sorted(_jsonable(v) for v in value)
    if isinstance(value, float) and math.isinf(value):
        return "unlimited"
    if isinstance(value, ipaddress.IPv4Address):
        return str(value)
    return value


def message_to_dict(message: Message) -> dict:
    """Flatten a message into JSON-friendly data, ``type`` first."""
    data = {"type": message.type}
    data.update(_jsonable(dataclasses.asdict(message)))
    return data


def decode_stream(
    parser: MessageParser, stream: Iterable[bytes], out: TextIO
) -> tuple[int, int]:
    """Decode every non-empty line of ``stream``; return (decoded, rejected)."""
    decoded = rejected = 0
    for lineno, raw in enumerate(stream, start=1):
        raw = raw.rstrip(b"\r\n")
        if not raw.strip():
            continue
        try:
            message = parser.parse(raw)
        except IRCSupportError as e:
            rejected += 1
            log_error("Failed to decode line", e, context={"lineno": lineno})
            continue
        if message is None:
            logger.log_event("cli", "line_skipped", level=logging.DEBUG, lineno=lineno)
            continue
        decoded += 1
        out.write(json.dumps(message_to_dict(message), ensure_ascii=False) + "\n")
    return decoded, rejected


def _open_inputs(files: list[str]) -> Iterable[BinaryIO]:
    if not files:
        yield sys.stdin.buffer
        return
    for name in files:
        with open(name, "rb") as f:
            yield f


def main(argv: list[str] | None = None, out: TextIO | None = None) -> int:
    """Entry point; returns the process exit status."""
    args = build_arg_parser().parse_args(argv)
    LoggerConfigurator().configure()
    out = out or sys.stdout

    try:
        config = load_config(args.config)
        if args.encoding:
            config = config.model_copy(update={"encoding": args.encoding})
    except IRCSupportError as e:
        log_error("Configuration error", e)
        return 2

    parser = MessageParser(config)
    decoded = rejected = 0
    try:
        for stream in _open_inputs(args.files):
            d, r = decode_stream(parser, stream, out)
            decoded += d
            rejected += r
    except OSError as e:
        log_error("Cannot read input", e)
        return 2

    logger.log_event("cli", "finished", level=logging.INFO, decoded=decoded, rejected=rejected)
    return 1 if rejected else 0


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    run()
