# Filename: jobs.py
# Author: Rich Lewis @RichLewis007
# Description: Work items and per-directory classification state. Defines the two job kinds
#              routed through the job queue and the three-phase state machine that pairs a
#              manifest file with its artifact directory inside a single listing.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from sweeper.workers.job_queue import JobSender


@dataclass(frozen=True, slots=True)
class ScanJob:
    # List and classify one directory. Holds a producer handle so that the queue
    # stays open until the scan has forwarded everything it found.

    path: Path
    sender: JobSender


@dataclass(frozen=True, slots=True)
class RemoveJob:
    # Recursively delete one artifact directory.

    path: Path


Job: TypeAlias = ScanJob | RemoveJob


@dataclass(frozen=True, slots=True)
class Markers:
    # Names that identify a project root and its build-output directory.

    manifest: str = "Cargo.toml"
    artifact: str = "target"


class ScanPhase(Enum):
    NOTHING = "nothing"
    FOUND_MANIFEST = "found-manifest"
    FOUND_ARTIFACT = "found-artifact"


@dataclass(slots=True)
class ScanState:
    """Classification state for one pass over one directory listing.

    The manifest file and the artifact directory may be listed in either
    order, so the decision to delete is deferred until both have been seen.
    At most one artifact path is held while waiting for the manifest; a second
    artifact-named directory in the same listing is ignored.

    ``pending`` is set only while ``phase`` is ``FOUND_ARTIFACT``. An instance
    belongs to a single scan and must never be shared between directories.
    """

    phase: ScanPhase = ScanPhase.NOTHING
    pending: Path | None = None

    def see_manifest(self) -> Path | None:
        # Record the manifest file; return an artifact path that is now confirmed.
        if self.phase is ScanPhase.FOUND_ARTIFACT:
            confirmed, self.pending = self.pending, None
            self.phase = ScanPhase.FOUND_MANIFEST
            return confirmed
        self.phase = ScanPhase.FOUND_MANIFEST
        return None

    def see_artifact(self, path: Path) -> Path | None:
        # Record an artifact directory; return it when the manifest was already seen.
        if self.phase is ScanPhase.FOUND_MANIFEST:
            return path
        if self.phase is ScanPhase.NOTHING:
            self.phase = ScanPhase.FOUND_ARTIFACT
            self.pending = path
        return None
