"""mdjrnl - Main entry point."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .config import load_profile, resolve_commit_policy
from .engine import JournalEngine
from .logging_setup import setup_logging
from .models import JournalError


def parse_force(value: str) -> bool:
    """Accept ``force``/``true``/``false`` for the optional push argument."""
    lowered = value.lower()
    if lowered in ("force", "true"):
        return True
    if lowered == "false":
        return False
    raise argparse.ArgumentTypeError(f"expected 'force', 'true' or 'false', got {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdjrnl",
        description="Open dated or namespaced Markdown notes and keep them in git",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--profile",
        "-p",
        help="Profile to use (default: 'profile' key in config, else 'default')",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        help="Path to config file (default: $XDG_CONFIG_HOME/jrnl/config.toml)",
    )
    parser.add_argument(
        "--debug",
        "-d",
        action="count",
        default=0,
        help="Turn debugging information on (repeat for more)",
    )
    parser.add_argument(
        "--commit",
        action="store_true",
        help="Enable git commit (overrides config)",
    )
    parser.add_argument(
        "--no-commit",
        action="store_true",
        help="Disable git commit (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command")

    date_parser = subparsers.add_parser("date", help="Open notes for date")
    date_parser.add_argument("year", type=int)
    date_parser.add_argument("month", type=int)
    date_parser.add_argument("day", type=int)

    ns_parser = subparsers.add_parser("ns", help="Open notes at a namespace path")
    ns_parser.add_argument("ns", nargs="+", metavar="segment")

    push_parser = subparsers.add_parser("push", help="Push the journal repository")
    push_parser.add_argument(
        "force",
        nargs="?",
        type=parse_force,
        default=False,
        help="'force' (or 'true') to push with --force",
    )

    return parser


def run(args: argparse.Namespace) -> None:
    """Execute one parsed command.

    Raises:
        JournalError: On any fatal configuration, usage or launch failure.
    """
    profile = load_profile(args.config, args.profile)
    should_commit = resolve_commit_policy(profile, args.commit, args.no_commit)
    engine = JournalEngine(profile)

    if args.command == "push":
        engine.push(force=args.force)
        return

    if args.command == "date":
        engine.open_date(args.year, args.month, args.day)
    elif args.command == "ns":
        engine.open_namespace(args.ns)
    else:
        engine.open_today()

    if should_commit:
        engine.commit()


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.debug)

    try:
        run(args)
    except JournalError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
