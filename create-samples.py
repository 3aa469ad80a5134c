"""Create a sample workspace mirroring the integration-test tree.

The tree mixes confirmed projects, an orphaned ``target/`` without a manifest
and a manifest without build output, which makes it handy for manual QA of
``sweeper`` or for demonstrations. Usage examples:

    uv run --extra dev python create-samples.py
    uv run --extra dev python create-samples.py --output ./temp/samples --force
    uv run sweeper ./temp/samples --dry-run

The ``--extra dev`` flag ensures optional development dependencies are available.
"""

from __future__ import annotations

import argparse
import shutil
from pathlib import Path

from tests.helpers import build_workspace, make_project


def create_samples(destination: Path, *, force: bool, copies: int = 1) -> Path:
    """Create the sample tree at ``destination``.

    Args:
        destination: Directory where the structure should be created.
        force: If True, overwrite the destination when it already exists.
        copies: Number of independent workspaces to create side by side.

    Returns:
        The destination path.
    """
    if destination.exists():
        if not force:
            raise FileExistsError(
                f"Destination {destination} already exists. Use --force to overwrite."
            )
        shutil.rmtree(destination)

    destination.mkdir(parents=True, exist_ok=True)
    for index in range(copies):
        build_workspace(destination / f"workspace-{index + 1}")

    _ensure_additional_examples(destination)

    return destination


def _ensure_additional_examples(destination: Path) -> None:
    """Create sample entries not covered by the fixture helper."""
    # A second ecosystem, matched with --manifest package.json --artifact node_modules.
    make_project(destination / "web", manifest="package.json", artifact="node_modules")
    # A file named like the artifact directory is never touched.
    lone = destination / "scripts"
    lone.mkdir(exist_ok=True)
    (lone / "Cargo.toml").write_text("[package]\n")
    (lone / "target").write_text("not a directory\n")


def main() -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Create a sample directory tree with build artifacts for sweeper to clean.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("./temp"),
        help="Destination directory for generated samples (default: %(default)s).",
    )
    parser.add_argument(
        "--copies",
        type=int,
        default=1,
        help="Number of workspaces to generate (default: %(default)s).",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite the destination directory if it already exists.",
    )

    args = parser.parse_args()
    target = create_samples(args.output, force=args.force, copies=args.copies)
    print(f"Created sample tree at {target.resolve()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
