"""
Enigma command-line interface.

Usage:
    enigma CONFIG                   # messages from stdin, output to stdout
    enigma CONFIG INPUT             # messages from INPUT
    enigma CONFIG INPUT OUTPUT      # output written to OUTPUT

Exits with status 1 and an ``Error:`` line on stderr if the configuration or
the input is invalid.
"""
from __future__ import annotations

import argparse
import sys
from typing import Iterator, TextIO

from app.core.config import get_settings
from app.core.exceptions import EnigmaError
from app.core.logging_config import setup_logging
from app.services.enigma.config_parser import build_machine, load_machine_config
from app.services.enigma.processor import MessageProcessor


class _ArgumentParser(argparse.ArgumentParser):
    """Reports usage mistakes as an ``Error:`` line with exit status 1."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(1, f"Error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = _ArgumentParser(
        prog="enigma",
        description="Encrypt or decrypt messages with a configurable rotor machine.",
    )
    parser.add_argument("config", help="machine configuration file")
    parser.add_argument("input", nargs="?", help="message file (default: stdin)")
    parser.add_argument("output", nargs="?", help="output file (default: stdout)")
    parser.add_argument(
        "--group-size",
        type=int,
        default=settings.output_group_size,
        help="symbols per output group (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="logging level (default: %(default)s)",
    )
    return parser


def _open(name: str | None, mode: str, default: TextIO) -> TextIO:
    if name is None:
        return default
    try:
        return open(name, mode, encoding="utf-8")
    except OSError as e:
        raise EnigmaError(f"could not open {name}", {"path": name}) from e


def _read_lines(source: TextIO, name: str) -> Iterator[str]:
    try:
        yield from source
    except UnicodeDecodeError as e:
        raise EnigmaError(f"could not read {name}: not valid UTF-8", {"path": name}) from e


def run(args: argparse.Namespace) -> None:
    """Configure a machine from ARGS and process the input document."""
    machine = build_machine(load_machine_config(args.config))
    processor = MessageProcessor(machine, group_size=args.group_size)

    source = _open(args.input, "r", sys.stdin)
    try:
        sink = _open(args.output, "w", sys.stdout)
        try:
            lines = _read_lines(source, args.input or "<stdin>")
            for line in processor.process_lines(lines):
                sink.write(line + "\n")
        finally:
            if sink is not sys.stdout:
                sink.close()
    finally:
        if source is not sys.stdin:
            source.close()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    try:
        run(args)
    except EnigmaError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
