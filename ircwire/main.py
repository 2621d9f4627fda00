"""Command line entry point: parse IRC lines from a file or stdin."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import TextIO

from .config import WireConfig
from .errors import ConfigError, log_error
from .irc import Line, LineDispatcher, SelfIdentity
from .logging_config import LoggerConfigurator
from .logs.logger import logger

READ_CHUNK_CHARS = 4096


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ircwire", description="Parse raw IRC protocol lines."
    )
    parser.add_argument(
        "file", nargs="?", help="file with one IRC line per line (default: stdin)"
    )
    parser.add_argument(
        "--nick",
        default="",
        help="own nickname for source_is_me (learned from 001 when omitted; "
        "until then JSON marks every nick-less source as me)",
    )
    parser.add_argument("--json", action="store_true", help="print one JSON object per line")
    return parser


def summarize(line: Line) -> dict[str, object]:
    return {
        "command": line.command,
        "source": line.source.display(),
        "ident": line.source.ident(),
        "args": list(line.args),
        "destination": line.destination,
        "source_is_me": line.source_is_me(),
        "timestamp": line.timestamp.isoformat(),
    }


def format_line(line: Line, as_json: bool) -> str:
    summary = summarize(line)
    if as_json:
        return json.dumps(summary)
    text = f"{line.command:<10} {line.source.display() or '-':<20} {summary['args']!r}"
    if line.destination:
        text += f" -> {line.destination}"
    if summary["source_is_me"] and line.source.nick:
        text += " (me)"
    return text


async def run(stream: TextIO, out: TextIO, nick: str, as_json: bool) -> int:
    """Feed ``stream`` through a dispatcher and print each parsed line.

    Returns the number of lines that had a command.
    """
    config = WireConfig.from_env()
    dispatcher = LineDispatcher(SelfIdentity(nick), config)
    parsed = 0

    def show(line: Line) -> None:
        nonlocal parsed
        parsed += 1
        print(format_line(line, as_json), file=out)

    dispatcher.register("*", show)

    buffer = ""
    while chunk := stream.read(READ_CHUNK_CHARS):
        buffer = await dispatcher.process_incoming_data(buffer, chunk)
    if buffer:
        await dispatcher.process_incoming_data(buffer, "\n")
    return parsed


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    LoggerConfigurator().configure()
    logger.log_event("app", "start")
    try:
        if args.file:
            with open(args.file, encoding="utf-8", errors="replace") as f:
                parsed = asyncio.run(run(f, sys.stdout, args.nick, args.json))
        else:
            parsed = asyncio.run(run(sys.stdin, sys.stdout, args.nick, args.json))
    except ConfigError as e:
        logger.log_event("config", "invalid", level=logging.ERROR, error=str(e))
        return 1
    except OSError as e:
        log_error("Failed to read input", e, context={"file": args.file})
        return 1
    logger.log_event("app", "shutdown", parsed=parsed)
    return 0
