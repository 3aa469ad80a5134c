"""Test doubles and tree builders shared across the suite."""

from __future__ import annotations

import os
import threading
from collections.abc import Iterable
from pathlib import Path

from sweeper.errors import SweepError


class RecordingObserver:
    """Observer double that records every event it receives."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.errors: list[SweepError] = []
        self.removed: list[Path] = []
        self.scanned: list[Path] = []

    def on_error(self, error: SweepError) -> None:
        with self._lock:
            self.errors.append(error)

    def on_removal(self, path: Path) -> None:
        with self._lock:
            self.removed.append(path)

    def on_scanned(self, path: Path) -> None:
        with self._lock:
            self.scanned.append(path)


class FakeEntry:
    """Minimal stand-in for ``os.DirEntry`` with a scripted type."""

    def __init__(self, parent: Path, name: str, *, is_dir: bool, error: OSError | None = None) -> None:
        self.name = name
        self.path = os.path.join(parent, name)
        self._is_dir = is_dir
        self._error = error

    def is_dir(self, *, follow_symlinks: bool = True) -> bool:
        if self._error is not None:
            raise self._error
        return self._is_dir


class FakeListing:
    """Context-managed iterator mimicking the object returned by ``os.scandir``."""

    def __init__(self, entries: Iterable[FakeEntry], *, fail_after: int | None = None) -> None:
        self._entries = list(entries)
        self._index = 0
        self._fail_after = fail_after
        self.closed = False

    def __enter__(self) -> FakeListing:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.closed = True

    def __iter__(self) -> FakeListing:
        return self

    def __next__(self) -> FakeEntry:
        if self._fail_after is not None and self._index == self._fail_after:
            raise OSError(5, "Input/output error")
        if self._index >= len(self._entries):
            raise StopIteration
        entry = self._entries[self._index]
        self._index += 1
        return entry


def make_project(directory: Path, *, manifest: str = "Cargo.toml", artifact: str = "target") -> Path:
    """Create a project with a manifest and a populated artifact directory."""
    directory.mkdir(parents=True, exist_ok=True)
    (directory / manifest).write_text('[package]\nname = "demo"\n')
    build = directory / artifact / "debug" / "deps"
    build.mkdir(parents=True)
    (build / "libdemo.rlib").write_bytes(b"\0" * 64)
    return directory / artifact


def build_workspace(root: Path) -> Path:
    """Build a tree with matched, unmatched and nested projects under ``root``."""
    root.mkdir(parents=True, exist_ok=True)

    make_project(root / "app")
    make_project(root / "libs" / "core")
    make_project(root / "libs" / "core" / "examples" / "demo")

    # Build output without a manifest next to it.
    (root / "orphan" / "target" / "debug").mkdir(parents=True)
    # Manifest without build output.
    (root / "fresh").mkdir()
    (root / "fresh" / "Cargo.toml").write_text("[package]\n")
    # Plain folders.
    (root / "docs" / "img").mkdir(parents=True)
    (root / "empty").mkdir()

    return root
