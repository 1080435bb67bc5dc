"""A simple clock-in/clock-out utility for CSV files.

Usage:
    clocker [-i INPUT_FILE] [-o OUTPUT_FILE] [log | view [all|latest] | archive | new-month]
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from .backend.clock import clock_from_env
from .backend.commands import CommandHandler
from .backend.config import DEFAULT_PATH, load_from_env
from .backend.errors import ClockerError
from .backend.io.files import read_text, write_text
from .backend.utils import get_full_day_minutes
from .backend.view import VIEW_SCOPES

__version__ = "0.1.0"

load_dotenv()


def build_parser() -> argparse.ArgumentParser:
    # Shared flags are accepted before or after the sub-command.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-i",
        "--input-file",
        default=argparse.SUPPRESS,
        help=f"Timelog to read (default: $CLOCKER_PATH or {DEFAULT_PATH})",
    )
    common.add_argument(
        "-o",
        "--output-file",
        default=argparse.SUPPRESS,
        help="File to write (default: the input file)",
    )
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Log which files are written",
    )

    parser = argparse.ArgumentParser(
        prog="clocker",
        description="A simple cli clock-in/clock-out utility for CSV files.",
        parents=[common],
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("log", parents=[common], help="Stamp the current time (default)")
    pv = sub.add_parser("view", parents=[common], help="Show logged days")
    pv.add_argument(
        "scope",
        nargs="?",
        choices=VIEW_SCOPES,
        default="latest",
        help="Show the latest day or all days (default: latest)",
    )
    sub.add_parser(
        "archive", parents=[common], help="Stamp, back up the timelog and start an empty one"
    )
    sub.add_parser(
        "new-month", parents=[common], help="Back up the timelog and start one for today"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    verbose = getattr(args, "verbose", False)
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    command = args.command or "log"
    try:
        config = load_from_env(
            getattr(args, "input_file", None), getattr(args, "output_file", None)
        )
        handler = CommandHandler(clock=clock_from_env(), full_day_minutes=get_full_day_minutes())
        outcome = handler.run(
            command, read_text(config.input_path), scope=getattr(args, "scope", "latest")
        )
        # Backup goes first so the primary is only replaced once the snapshot exists.
        if outcome.backup_text is not None:
            write_text(config.backup_path, outcome.backup_text)
        if outcome.output_text is not None:
            write_text(config.output_path, outcome.output_text)
    except (ClockerError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if outcome.message:
        print(outcome.message)
    return 0


if __name__ == "__main__":
    sys.exit(main())
