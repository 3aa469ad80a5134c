# Filename: delete_worker.py
# Author: Rich Lewis @RichLewis007
# Description: Removal of confirmed artifact directories. Deletes a directory tree in place
#              or moves it to the system trash, converting failures into DeletionError.

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from pathlib import Path

from sweeper.errors import DeletionError
from sweeper.services.trash import trash_directory

logger = logging.getLogger(__name__)

Remover = Callable[[Path], None]


def remove_tree(path: Path, *, use_trash: bool = False) -> None:
    # Delete ``path`` recursively, or trash it. Raises DeletionError on failure.
    try:
        if use_trash:
            trash_directory(path)
        else:
            shutil.rmtree(path)
    except OSError as exc:
        raise DeletionError(path, exc) from exc
    logger.debug("Removed %s%s", path, " (trash)" if use_trash else "")


def skip_removal(path: Path) -> None:
    # Dry-run remover: leave the directory untouched.
    logger.debug("Dry run, keeping %s", path)


def build_remover(*, use_trash: bool = False, dry_run: bool = False) -> Remover:
    # Select the removal strategy for a run.
    if dry_run:
        return skip_removal
    if use_trash:
        return lambda path: remove_tree(path, use_trash=True)
    return remove_tree
