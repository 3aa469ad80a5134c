# Filename: logger.py
# Author: Rich Lewis @RichLewis007
# Description: Logging configuration utilities. Sets up rotating file and console handlers
#              so every error hit during a sweep is recorded with its underlying cause.

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from .config import app_dirs

LOG_FILENAME = "sweeper.log"


class MinimumLevelFilter(logging.Filter):
    # Drop records below a level. Unlike a handler level, filters survive handler
    # swaps such as tqdm's logging redirect.

    def __init__(self, level: int) -> None:
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= self.level


def _get_log_path() -> Path:
    # Return the path to the rotating log file, creating folders as needed.
    path = Path(app_dirs().user_log_dir)
    path.mkdir(parents=True, exist_ok=True)
    return path / LOG_FILENAME


def configure(*, log_level: str = "INFO", log_path: Path | None = None) -> Path:
    # Configure root logger with rotating file and console handlers; return the log file.
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    log_path = log_path or _get_log_path()
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=2 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(threadName)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    console_level = getattr(logging, log_level.upper(), logging.INFO)
    console_handler.setLevel(console_level)
    console_handler.addFilter(MinimumLevelFilter(console_level))

    # Avoid duplicate handlers when reconfiguring.
    root.handlers.clear()
    root.addHandler(file_handler)
    root.addHandler(console_handler)
    return log_path
