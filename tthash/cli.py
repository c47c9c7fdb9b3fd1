"""
MIT License

Command-line interface for tthash.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from .core.batch import INPUT_FORMATS, BatchConfig, run_batch
from .core.digest import render_trace, trace, tth
from .io.tsv import FORMATS, write_table
from .util.logging import get_logger, set_verbosity

LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tthash", description="Toy Tetragraph Hash (4-letter teaching digest)")
    parser.add_argument("--quiet", action="store_true", help="Only log warnings and errors")
    subparsers = parser.add_subparsers(dest="command")

    hash_parser = subparsers.add_parser("hash", help="Hash a message given as arguments or on stdin")
    hash_parser.set_defaults(handler=run_hash_command)
    add_message_args(hash_parser)

    trace_parser = subparsers.add_parser("trace", help="Show every compression round for a message")
    trace_parser.set_defaults(handler=run_trace_command)
    add_message_args(trace_parser)

    batch_parser = subparsers.add_parser("batch", help="Hash every message in a file")
    batch_parser.set_defaults(handler=run_batch_command)
    add_batch_args(batch_parser)
    return parser


def add_message_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("message", nargs="*", help="Message words, joined with single spaces")
    parser.add_argument("--stdin", action="store_true", help="Read the whole of stdin as one message")


def add_batch_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--in", dest="input_path", required=True, help="Input file")
    parser.add_argument("--format", dest="input_format", choices=list(INPUT_FORMATS), default="lines")
    parser.add_argument("--column", default="message", help="Message column (table format)")
    parser.add_argument("--id-column", help="Identifier column (table format)")
    parser.add_argument("--skip-empty", action="store_true", help="Ignore blank lines (lines format)")
    parser.add_argument("--out", help="Output path; defaults to stdout")
    parser.add_argument("--emit", choices=list(FORMATS), default="tsv")


def dispatch(args: argparse.Namespace) -> None:
    set_verbosity(getattr(args, "quiet", False))
    if getattr(args, "handler", None) is None:
        raise SystemExit("A command is required: hash, trace or batch")
    args.handler(args)


def read_message(args: argparse.Namespace) -> str:
    if args.stdin:
        if args.message:
            raise SystemExit("Give the message either as arguments or with --stdin, not both")
        return sys.stdin.read()
    if not args.message:
        raise SystemExit("No message given (pass words or use --stdin)")
    return " ".join(args.message)


def run_hash_command(args: argparse.Namespace) -> None:
    sys.stdout.write(tth(read_message(args)) + "\n")


def run_trace_command(args: argparse.Namespace) -> None:
    lines: List[str] = render_trace(trace(read_message(args)))
    for line in lines:
        sys.stdout.write(line + "\n")


def run_batch_command(args: argparse.Namespace) -> None:
    source = Path(args.input_path)
    if not source.exists():
        raise SystemExit(f"Input not found: {source}")
    config = BatchConfig(
        source=str(source),
        input_format=args.input_format,
        column=args.column,
        id_column=args.id_column,
        skip_empty=args.skip_empty,
    )
    try:
        result = run_batch(config)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    if args.out:
        write_table(result.table, args.out, fmt=args.emit)
        LOGGER.info("Wrote %d digests to %s", len(result.table), args.out)
    else:
        write_table(result.table, sys.stdout, fmt=args.emit)


__all__ = ["build_parser", "dispatch"]
