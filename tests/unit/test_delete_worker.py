"""Unit tests for artifact removal strategies."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from sweeper.errors import DeletionError
from sweeper.workers import delete_worker
from sweeper.workers.delete_worker import build_remover, remove_tree, skip_removal
from tests.helpers import make_project


def test_remove_tree_deletes_recursively(tmp_path: Path) -> None:
    artifact = make_project(tmp_path / "demo")

    remove_tree(artifact)

    assert not artifact.exists()
    assert (tmp_path / "demo" / "Cargo.toml").exists()


def test_remove_tree_wraps_failures(tmp_path: Path) -> None:
    missing = tmp_path / "gone"

    with pytest.raises(DeletionError) as excinfo:
        remove_tree(missing)

    assert excinfo.value.path == missing
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_remove_tree_uses_trash_when_requested(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    trashed: list[Path] = []
    monkeypatch.setattr(delete_worker, "trash_directory", trashed.append)
    monkeypatch.setattr(shutil, "rmtree", lambda path: pytest.fail("rmtree should not run"))

    remove_tree(tmp_path / "target", use_trash=True)

    assert trashed == [tmp_path / "target"]


def test_trash_failure_becomes_deletion_error(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    def refuse(path: Path) -> None:
        raise PermissionError(13, "Trash is not writable", str(path))

    monkeypatch.setattr(delete_worker, "trash_directory", refuse)

    with pytest.raises(DeletionError):
        remove_tree(tmp_path / "target", use_trash=True)


def test_build_remover_selects_strategy(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    trashed: list[Path] = []
    monkeypatch.setattr(delete_worker, "trash_directory", trashed.append)

    assert build_remover() is remove_tree
    assert build_remover(dry_run=True, use_trash=True) is skip_removal

    build_remover(use_trash=True)(tmp_path / "target")
    assert trashed == [tmp_path / "target"]


def test_dry_run_leaves_directory_in_place(tmp_path: Path) -> None:
    artifact = make_project(tmp_path / "demo")

    skip_removal(artifact)

    assert artifact.is_dir()
