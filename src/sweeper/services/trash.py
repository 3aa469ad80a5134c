# Filename: trash.py
# Author: Rich Lewis @RichLewis007
# Description: Moves artifact directories to the system trash instead of deleting them
#              outright. Wraps the send2trash library; its errors are OSError subclasses.

from __future__ import annotations

import logging
from pathlib import Path

from send2trash import send2trash

logger = logging.getLogger(__name__)


def trash_directory(path: Path) -> None:
    # Move a directory tree to the Trash. Missing paths raise FileNotFoundError.
    if not path.exists():
        raise FileNotFoundError(2, "No such file or directory", str(path))
    logger.debug("Sending %s to trash", path)
    send2trash(str(path))
