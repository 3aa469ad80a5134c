# Filename: job_queue.py
# Author: Rich Lewis @RichLewis007
# Description: Unbounded multi-producer, multi-consumer job queue. Producers hold sender
#              handles; the queue closes by itself once every handle has been released and
#              all pending jobs have been handed out, which is how a scan of unknown depth
#              terminates without any worker knowing the shape of the tree.

from __future__ import annotations

import logging
import threading
from collections import deque
from collections.abc import Iterator

from sweeper.models.jobs import Job

logger = logging.getLogger(__name__)


class QueueClosedError(RuntimeError):
    """Raised when a job is sent to a queue that has been shut down."""


class JobQueue:
    """FIFO of jobs shared by every worker thread.

    Each job is delivered to exactly one consumer. ``receive`` blocks until a
    job is available or the queue is closed, i.e. no sender handle is alive
    and nothing is pending.
    """

    def __init__(self) -> None:
        self._jobs: deque[Job] = deque()
        self._condition = threading.Condition()
        self._senders = 0
        self._shutdown = False

    def open_sender(self) -> JobSender:
        # Create a new producer handle that keeps the queue open until released.
        with self._condition:
            if self._shutdown:
                raise QueueClosedError("Job queue has been shut down")
            self._senders += 1
        return JobSender(self)

    @property
    def closed(self) -> bool:
        with self._condition:
            return self._is_closed()

    def __len__(self) -> int:
        with self._condition:
            return len(self._jobs)

    def receive(self) -> Job | None:
        # Block for the next job; ``None`` means the queue is closed for good.
        with self._condition:
            while not self._jobs:
                if self._is_closed():
                    return None
                self._condition.wait()
            return self._jobs.popleft()

    def __iter__(self) -> Iterator[Job]:
        while (job := self.receive()) is not None:
            yield job

    def shutdown(self) -> None:
        # Close the queue permanently, dropping anything still pending.
        with self._condition:
            if self._jobs:
                logger.debug("Discarding %d pending jobs on shutdown", len(self._jobs))
            self._shutdown = True
            self._jobs.clear()
            self._condition.notify_all()

    # Internal helpers -------------------------------------------------

    def _is_closed(self) -> bool:
        return self._shutdown or (self._senders == 0 and not self._jobs)

    def _put(self, job: Job) -> None:
        with self._condition:
            if self._shutdown:
                raise QueueClosedError("Job queue has been shut down")
            self._jobs.append(job)
            self._condition.notify()

    def _retain(self) -> None:
        with self._condition:
            self._senders += 1

    def _release(self) -> None:
        with self._condition:
            self._senders -= 1
            if self._senders == 0:
                # Wake every blocked consumer so they can observe closure.
                self._condition.notify_all()


class JobSender:
    """Producer handle for a :class:`JobQueue`.

    Every handle must be released exactly once; extra calls to ``release`` are
    ignored. Handles are usable as context managers.
    """

    __slots__ = ("_queue", "_released", "_lock")

    def __init__(self, queue: JobQueue) -> None:
        self._queue = queue
        self._released = False
        self._lock = threading.Lock()

    @property
    def released(self) -> bool:
        return self._released

    def send(self, job: Job) -> None:
        if self._released:
            raise QueueClosedError("Sender handle has already been released")
        self._queue._put(job)

    def clone(self) -> JobSender:
        # Return an independent handle; the queue stays open while either is alive.
        with self._lock:
            if self._released:
                raise QueueClosedError("Cannot clone a released sender handle")
            self._queue._retain()
        return JobSender(self._queue)

    def release(self) -> None:
        with self._lock:
            if self._released:
                return
            self._released = True
        self._queue._release()

    def __enter__(self) -> JobSender:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __repr__(self) -> str:
        state = "released" if self._released else "live"
        return f"<JobSender {state}>"
