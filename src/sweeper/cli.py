# Filename: cli.py
# Author: Rich Lewis @RichLewis007
# Description: Command-line interface for Target Sweeper. Builds the argument parser and
#              turns parsed options plus stored settings into run options.

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

from . import __version__
from .models.jobs import Markers
from .services.config import LOG_LEVELS, Settings


@dataclass(frozen=True, slots=True)
class RunOptions:
    # Fully resolved options for one sweep.

    directory: Path
    concurrency: int
    markers: Markers
    use_trash: bool
    dry_run: bool
    log_level: str


def _positive_int(value: str) -> int:
    # argparse type for strictly positive integers.
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def _marker_name(value: str) -> str:
    if not value or "/" in value:
        raise argparse.ArgumentTypeError(f"must be a plain file name, got {value!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    # Create and configure the command-line argument parser.
    parser = argparse.ArgumentParser(
        prog="sweeper",
        description="Clean build artifacts: delete every artifact directory that sits "
        "next to a project manifest, scanning the tree concurrently.",
    )
    parser.add_argument("dir", type=Path, help="Directory to scan recursively for build artifacts.")
    parser.add_argument(
        "--concurrency",
        type=_positive_int,
        default=None,
        help="Number of concurrent jobs (default: 8, or the value in settings.toml).",
    )
    parser.add_argument(
        "--manifest",
        type=_marker_name,
        default=None,
        help="File name that marks a project root (default: Cargo.toml).",
    )
    parser.add_argument(
        "--artifact",
        type=_marker_name,
        default=None,
        help="Directory name of the build output to remove (default: target).",
    )
    parser.add_argument(
        "--trash",
        action="store_true",
        default=None,
        help="Move artifact directories to the system Trash instead of deleting them.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report what would be removed without deleting anything.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Console log level (default: INFO).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_options(
    parser: argparse.ArgumentParser,
    args: argparse.Namespace,
    settings: Settings,
) -> RunOptions:
    # Merge parsed arguments over stored settings and validate the root directory.
    merged = settings.merged(
        concurrency=args.concurrency,
        manifest=args.manifest,
        artifact=args.artifact,
        use_trash=args.trash,
        log_level=args.log_level,
    )
    directory = args.dir.expanduser()
    if not directory.is_dir():
        parser.error(f"not a directory: {directory}")

    return RunOptions(
        directory=directory,
        concurrency=merged.concurrency,
        markers=Markers(manifest=merged.manifest, artifact=merged.artifact),
        use_trash=merged.use_trash,
        dry_run=args.dry_run,
        log_level=merged.log_level,
    )
