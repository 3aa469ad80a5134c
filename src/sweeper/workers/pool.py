# Filename: pool.py
# Author: Rich Lewis @RichLewis007
# Description: Worker pool and run orchestration. Seeds the job queue with the root directory,
#              drains it with a fixed number of worker threads and folds every failure into a
#              single success flag.

from __future__ import annotations

import logging
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from pathlib import Path

from sweeper.errors import SweepError
from sweeper.models.jobs import Markers, RemoveJob, ScanJob
from sweeper.services.observer import Observer
from sweeper.workers.delete_worker import Remover, build_remover, remove_tree
from sweeper.workers.job_queue import JobQueue, JobSender, QueueClosedError
from sweeper.workers.scan_worker import DEFAULT_MARKERS, scan

logger = logging.getLogger(__name__)


def run_worker(
    queue: JobQueue,
    observer: Observer,
    *,
    markers: Markers = DEFAULT_MARKERS,
    remove: Remover = remove_tree,
) -> bool:
    """Process jobs until the queue closes.

    Returns True if any scan or removal handled by this worker failed.
    """
    has_error = False
    for job in queue:
        if isinstance(job, ScanJob):
            failed = _run_scan(job, observer, markers)
        else:
            failed = _run_removal(job, observer, remove)
        has_error = failed or has_error
    return has_error


def _run_scan(job: ScanJob, observer: Observer, markers: Markers) -> bool:
    # Scan one directory, forwarding new jobs through the job's own sender.
    has_error = False
    with job.sender as sender:
        for result in scan(job.path, sender, markers=markers):
            if isinstance(result, SweepError):
                observer.on_error(result)
                has_error = True
                continue
            _forward(sender, result)
    observer.on_scanned(job.path)
    return has_error


def _forward(sender: JobSender, job: ScanJob | RemoveJob) -> None:
    # A closed queue only happens during shutdown; the job is dropped quietly.
    try:
        sender.send(job)
    except QueueClosedError:
        logger.debug("Queue closed, dropping job for %s", job.path)
        if isinstance(job, ScanJob):
            job.sender.release()


def _run_removal(job: RemoveJob, observer: Observer, remove: Remover) -> bool:
    try:
        remove(job.path)
    except SweepError as exc:
        observer.on_error(exc)
        return True
    observer.on_removal(job.path)
    return False


def clean_dir(
    directory: Path,
    worker_count: int,
    observer: Observer,
    *,
    markers: Markers = DEFAULT_MARKERS,
    use_trash: bool = False,
    dry_run: bool = False,
) -> bool:
    """Remove every confirmed artifact directory below ``directory``.

    Args:
        directory: Root of the tree to scan. The root itself is scanned like
            any other directory.
        worker_count: Number of worker threads; must be at least 1.
        observer: Receives error, removal and scanned events from the workers.
        markers: Manifest file and artifact directory names to look for.
        use_trash: Move artifact directories to the Trash instead of deleting them.
        dry_run: Report removals without touching the filesystem.

    Returns:
        True when every scan and every removal succeeded.
    """
    if worker_count < 1:
        raise ValueError(f"worker_count must be at least 1, got {worker_count}")

    queue = JobQueue()
    remove = build_remover(use_trash=use_trash, dry_run=dry_run)

    with queue.open_sender() as sender:
        sender.send(ScanJob(directory, sender.clone()))

    logger.info(
        "Sweeping %s for %s/ next to %s with %d workers",
        directory,
        markers.artifact,
        markers.manifest,
        worker_count,
    )
    with ThreadPoolExecutor(max_workers=worker_count, thread_name_prefix="sweeper") as executor:
        futures = [
            executor.submit(run_worker, queue, observer, markers=markers, remove=remove)
            for _ in range(worker_count)
        ]
        done, _ = wait(futures, return_when=FIRST_EXCEPTION)
        if any(future.exception() is not None for future in done):
            # Let the surviving workers exit so the exception can be re-raised.
            queue.shutdown()

    has_error = any([future.result() for future in futures])
    logger.info("Sweep of %s finished %s", directory, "with errors" if has_error else "cleanly")
    return not has_error
