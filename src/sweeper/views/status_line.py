# Filename: status_line.py
# Author: Rich Lewis @RichLewis007
# Description: Terminal status line shown while a sweep runs. Renders an indeterminate tqdm
#              indicator with a spinner, elapsed time and the latest totals.

from __future__ import annotations

import sys
import threading
from typing import TextIO

from tqdm import tqdm

# tqdm draws no spinner for unknown totals; the frame follows the event count.
_SPINNER = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"
_REFRESH_INTERVAL = 0.1


class StatusLine:
    # Single-line progress indicator; safe to update from worker threads.

    def __init__(self, *, file: TextIO | None = None, enabled: bool = True) -> None:
        self._lock = threading.Lock()
        self._message = "Starting"
        self._finished = False
        self._bar = tqdm(
            total=None,
            bar_format="{desc} [{elapsed}]",
            file=file or sys.stderr,
            disable=not enabled,
            leave=True,
            mininterval=_REFRESH_INTERVAL,
            miniters=1,
        )
        self._bar.set_description_str(self._render(), refresh=False)

    @property
    def message(self) -> str:
        return self._message

    def set_message(self, message: str) -> None:
        # Record the newest message; tqdm redraws at most once per mininterval.
        with self._lock:
            if self._finished:
                return
            self._message = message
            self._bar.set_description_str(self._render(), refresh=False)
            self._bar.update()

    def finish(self, message: str | None = None) -> None:
        # Draw the final totals and leave them on screen.
        with self._lock:
            if self._finished:
                return
            self._finished = True
            if message is not None:
                self._message = message
            self._bar.set_description_str(f"✓ {self._message}", refresh=True)
            self._bar.close()

    def __enter__(self) -> StatusLine:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.finish()

    def _render(self) -> str:
        return f"{_SPINNER[self._bar.n % len(_SPINNER)]} {self._message}"
