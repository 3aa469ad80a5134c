# Filename: scan_worker.py
# Author: Rich Lewis @RichLewis007
# Description: Directory scanner. Lists one directory, classifies each entry against the
#              per-listing state machine and yields the resulting jobs: more directories to
#              scan and artifact directories confirmed for removal.

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from sweeper.errors import EntryMetadataError, ListingError, SweepError
from sweeper.models.jobs import Job, Markers, RemoveJob, ScanJob, ScanState
from sweeper.workers.job_queue import JobSender

logger = logging.getLogger(__name__)

DEFAULT_MARKERS = Markers()


def scan(
    directory: Path,
    sender: JobSender,
    *,
    markers: Markers = DEFAULT_MARKERS,
) -> Iterator[Job | SweepError]:
    """Yield jobs and per-entry errors for the immediate entries of ``directory``.

    Entries are visited once, in the order the operating system lists them.
    A directory that cannot be opened or read yields a single
    :class:`ListingError` and nothing else after it. An entry whose type cannot
    be determined yields an :class:`EntryMetadataError` and is skipped.

    Child :class:`ScanJob` instances receive their own clone of ``sender``.
    The generator is single-use.
    """
    state = ScanState()
    try:
        entries = os.scandir(directory)
    except OSError as exc:
        yield ListingError(directory, exc)
        return

    with entries:
        while True:
            try:
                entry = next(entries)
            except StopIteration:
                break
            except OSError as exc:
                yield ListingError(directory, exc)
                return

            try:
                job = _classify(state, entry, sender, markers)
            except EntryMetadataError as exc:
                yield exc
                continue
            if job is not None:
                yield job


def _classify(
    state: ScanState,
    entry: os.DirEntry[str],
    sender: JobSender,
    markers: Markers,
) -> Job | None:
    # Advance the state machine for one entry and return the job it produces, if any.
    path = Path(entry.path)
    try:
        is_dir = entry.is_dir(follow_symlinks=False)
    except OSError as exc:
        raise EntryMetadataError(path, exc) from exc

    if entry.name == markers.manifest:
        confirmed = state.see_manifest()
        if confirmed is not None:
            logger.debug("Manifest %s confirms %s", path, confirmed)
            return RemoveJob(confirmed)
        return None

    if is_dir and entry.name == markers.artifact:
        confirmed = state.see_artifact(path)
        return RemoveJob(confirmed) if confirmed is not None else None

    if is_dir:
        return ScanJob(path, sender.clone())

    return None
