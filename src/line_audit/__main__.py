"""CLI entry-point for line_audit.

Usage:
    python -m line_audit                      # TODOs and long lines
    python -m line_audit <pattern>            # search mode
    python -m line_audit --base <dir> [--strict] [--ignore-author REGEX ...]
    python -m line_audit -- <pattern-starting-with-dash>
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from pathlib import Path

from line_audit import __version__
from line_audit.core.config import DEFAULT_CONFIG, ScanConfig
from line_audit.core.runner import run_scan
from line_audit.strategies import AnalyzingStrategy, LineStrategy, SearchingStrategy
from line_audit.utils.exit_codes import ExitCode
from line_audit.vcs.blame import BlameError, GitBlameAttributor

_logger = logging.getLogger("line_audit")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="line-audit",
        description=(
            "Scan the source roots for TODO comments and over-long lines, "
            "or search them for PATTERN."
        ),
    )
    p.add_argument(
        "pattern",
        nargs="?",
        default=None,
        help="Regex to search for. Omit to report TODOs and long lines.",
    )
    p.add_argument(
        "--base",
        type=Path,
        default=Path("."),
        help="Directory the scan roots are resolved against (default: .).",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        default=False,
        help="Abort on unreadable entries and failed blames instead of skipping.",
    )
    p.add_argument(
        "--ignore-author",
        dest="ignore_authors",
        action="append",
        default=[],
        metavar="REGEX",
        help="Suppress long-line reports for matching authors (repeatable).",
    )
    p.add_argument(
        "--blame-timeout",
        type=float,
        default=None,
        metavar="SECONDS",
        help="Abandon a single git blame call after SECONDS.",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p


def _make_config(args: argparse.Namespace) -> ScanConfig:
    config = DEFAULT_CONFIG.with_overrides(strict=args.strict)
    if args.ignore_authors:
        config = config.with_ignored_authors(*args.ignore_authors)
    return config


def _make_strategy(args: argparse.Namespace, config: ScanConfig) -> LineStrategy:
    if args.pattern is not None:
        return SearchingStrategy(args.pattern)
    blame = GitBlameAttributor(args.base, timeout=args.blame_timeout)
    return AnalyzingStrategy(config, blame=blame)


def main(argv: list[str] | None = None) -> int:
    """Entry-point: returns an exit code (0 = scan completed, 2 = error)."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = _make_config(args)
    except re.error as e:
        print(f"error: invalid --ignore-author pattern: {e}", file=sys.stderr)
        return ExitCode.ERROR

    try:
        strategy = _make_strategy(args, config)
    except re.error as e:
        print(f"error: invalid search pattern {args.pattern!r}: {e}", file=sys.stderr)
        return ExitCode.ERROR

    try:
        run_scan(strategy, config, base=args.base)
    except (OSError, UnicodeDecodeError, BlameError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return ExitCode.ERROR
    return ExitCode.SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
