"""Command line interface for customizing a freshly cloned template."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn, Sequence

from rich.console import Console

from .console import configure_logging
from .errors import ManifestError, UsageError
from .manifest import Manifest
from .orchestrator import ProjectCustomizer
from .prompt import AnswerProvider, ConsoleAnswerProvider

LOGGER = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports bad arguments instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="customize-project",
        description="Rename and fill in a project template for a new project",
        add_help=False,
    )
    parser.add_argument("name", nargs="?", metavar="PROJECT-NAME", help="Name of the new project")
    parser.add_argument("-h", "--help", action="store_true", help="Show this message and exit")
    parser.add_argument(
        "-C",
        "--directory",
        type=Path,
        default=Path("."),
        help="Root of the template checkout (defaults to the current directory)",
    )
    parser.add_argument(
        "-m",
        "--manifest",
        type=Path,
        help="TOML manifest to use instead of the built-in one",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting",
    )
    return parser


def main(argv: Sequence[str] | None = None, *, answers: AnswerProvider | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        parser.print_usage(sys.stderr)
        sys.stderr.write(f"{parser.prog}: error: {exc}\n")
        return 1
    if args.help or not args.name:
        parser.print_help(sys.stdout)
        return 1

    configure_logging(verbose=args.verbose)

    try:
        manifest = Manifest.from_toml(args.manifest) if args.manifest else Manifest.default()
    except ManifestError as exc:
        LOGGER.error("%s", exc)
        return 1

    customizer = ProjectCustomizer(
        manifest,
        answers or ConsoleAnswerProvider(Console()),
        root=args.directory,
    )
    result = customizer.run(args.name)
    return 0 if result.ok else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
