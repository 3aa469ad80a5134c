# Filename: observer.py
# Author: Rich Lewis @RichLewis007
# Description: Progress observer contract and the live status implementation. Worker threads
#              report errors, removals and scanned directories here; the status keeps running
#              totals and publishes a one-line summary for the progress indicator.

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from sweeper.errors import SweepError

logger = logging.getLogger(__name__)


class Observer(Protocol):
    """Sink for events raised by worker threads.

    Implementations are called concurrently from several threads, with no
    ordering guarantee between event kinds or paths. They cannot influence
    the run: the success flag travels through worker return values.
    """

    def on_error(self, error: SweepError) -> None:
        """Report a failed listing, entry inspection or removal."""
        ...

    def on_removal(self, path: Path) -> None:
        """Report an artifact directory that was removed."""
        ...

    def on_scanned(self, path: Path) -> None:
        """Report a directory whose scan has finished, successfully or not."""
        ...


class NullObserver:
    # Observer that ignores every event.

    def on_error(self, error: SweepError) -> None:
        pass

    def on_removal(self, path: Path) -> None:
        pass

    def on_scanned(self, path: Path) -> None:
        pass


class _Counter:
    # Monotonic counter safe to bump from any thread.

    __slots__ = ("_lock", "_value")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value = 0

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        return self._value


@dataclass(frozen=True, slots=True)
class StatusSnapshot:
    # Point-in-time read of the run totals.

    errors: int
    removed: int
    scanned: int

    def describe(self) -> str:
        return f"{self.scanned} scanned, {self.removed} removed, {self.errors} errors"


class Status:
    """Observer that counts events and publishes a status message.

    The three totals are independent and may be read mid-update, so a
    message can briefly show totals that do not agree with each other.
    ``on_message`` receives the refreshed summary after every event.
    """

    def __init__(self, on_message: Callable[[str], None] | None = None) -> None:
        self._errors = _Counter()
        self._removed = _Counter()
        self._scanned = _Counter()
        self._on_message = on_message

    def on_error(self, error: SweepError) -> None:
        self._errors.increment()
        logger.warning("%s", error)
        self._update()

    def on_removal(self, path: Path) -> None:
        self._removed.increment()
        logger.info("Removed %s", path)
        self._update()

    def on_scanned(self, path: Path) -> None:
        self._scanned.increment()
        self._update()

    def snapshot(self) -> StatusSnapshot:
        return StatusSnapshot(
            errors=self._errors.value,
            removed=self._removed.value,
            scanned=self._scanned.value,
        )

    @property
    def message(self) -> str:
        return self.snapshot().describe()

    def _update(self) -> None:
        if self._on_message is not None:
            self._on_message(self.message)


__all__ = ["NullObserver", "Observer", "Status", "StatusSnapshot"]
