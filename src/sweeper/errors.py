# Filename: errors.py
# Author: Rich Lewis @RichLewis007
# Description: Error types raised while sweeping a tree. Each error records the path that
#              failed; the underlying OSError is chained as the cause.

from __future__ import annotations

from pathlib import Path


class SweepError(Exception):
    """Base class for failures that affect a single directory or entry.

    Sweep errors never abort a run. Workers turn them into observer error
    events and fold them into the run's failure flag.

    Attributes:
        path: The filesystem path the operation was working on.
    """

    action = "process"

    def __init__(self, path: Path, cause: OSError | None = None) -> None:
        self.path = path
        self.cause = cause
        message = f"Failed to {self.action} {path}"
        if cause is not None:
            message = f"{message}: {cause.strerror or cause}"
        super().__init__(message)


class ListingError(SweepError):
    # The directory could not be opened or read; the whole scan is abandoned.

    action = "list"


class EntryMetadataError(SweepError):
    # The type of a single entry could not be determined; only that entry is skipped.

    action = "inspect"


class DeletionError(SweepError):
    # Recursive removal of an artifact directory failed. Not retried.

    action = "remove"


__all__ = ["DeletionError", "EntryMetadataError", "ListingError", "SweepError"]
