"""Command line interface for ``tf``."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from . import __version__
from .config import GeneratorConfig
from .errors import (
    FileCreationError,
    InvalidInputError,
    TouchfileError,
)
from .generator import FileGenerator, build_request
from .kinds import FileFamily, FileKind
from .logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tf",
        description="Utility for generating files in supported file types",
    )
    parser.add_argument("name", nargs="?", help="Name of file to be generated")
    parser.add_argument(
        "-s",
        "--supported-filetypes",
        action="store_true",
        help="List of supported filetypes",
    )
    parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=Path("."),
        help="Existing directory the file is written into",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def format_supported_filetypes() -> str:
    """Return the text printed by ``tf --supported-filetypes``."""

    sections: list[str] = []
    for family in FileFamily:
        kinds = list(FileKind.in_family(family))
        width = max(len(kind.label) for kind in kinds)
        lines = [f"{family.value} Filetypes:"]
        lines.extend(f"  {kind.label.ljust(width)} : '.{kind.extension}'" for kind in kinds)
        sections.append("\n".join(lines))
    return "\n\n".join(sections) + "\n"


def _report(error: TouchfileError) -> None:
    if isinstance(error, InvalidInputError):
        prefix = "ERROR with input: "
    elif isinstance(error, FileCreationError):
        prefix = "ERROR creating file: "
    else:
        prefix = "ERROR: "
    print(f"{prefix}{error}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)

    if args.supported_filetypes:
        sys.stdout.write(format_supported_filetypes())
        return 0

    if args.name is None:
        print("ERROR: Program requires argument. See help with 'tf --help'", file=sys.stderr)
        return 1

    try:
        config = GeneratorConfig.from_environment()
        request = build_request(args.name)
        FileGenerator().generate(request, config, args.directory)
    except TouchfileError as exc:
        _report(exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
