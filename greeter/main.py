"""
Greeter CLI

Prompts for a name on stdin and prints a greeting plus the time it was made.

Usage:
    greeter
    greeter --shout
    greeter --shout=false
    python -m greeter -shout
"""
from __future__ import annotations

import argparse
import io
import logging
import sys
from typing import Optional

from greeter import config
from greeter.greeting import Greeting, InputReadError, greet, read_line

PROMPT = "Enter your name: "

_TRUE = {"1", "t", "true"}
_FALSE = {"0", "f", "false"}

logger = logging.getLogger(__name__)


def parse_bool(value: str) -> bool:
    v = value.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: {value!r}")


def log_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="greeter", description="Greet whoever is at the keyboard.")
    p.add_argument(
        "--shout", "-shout",
        nargs="?",
        const=True,
        type=parse_bool,
        default=config.SHOUT_DEFAULT,
        metavar="BOOL",
        help="Print greeting in uppercase",
    )
    p.add_argument("--no-shout", dest="shout", action="store_false", help="Print greeting as typed")
    return p


def main(argv: Optional[list[str]] = None) -> int:
    logging.basicConfig(
        level=log_level(config.LOG_LEVEL),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    args = build_parser().parse_args(argv)
    logger.debug("shout=%s", args.shout)

    # undecodable bytes are part of the name, not a read failure
    if isinstance(sys.stdin, io.TextIOWrapper) and not sys.stdin.closed:
        sys.stdin.reconfigure(errors="replace")

    print(PROMPT, end="", flush=True)
    try:
        name = read_line(sys.stdin)
    except InputReadError as e:
        logger.warning("input read failed: %s", e)
        print("Error reading input:", e)
        return 0
    logger.debug("read %d characters", len(name))

    result = Greeting(message=greet(name, args.shout))
    for line in result.lines():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
