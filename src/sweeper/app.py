# Filename: app.py
# Author: Rich Lewis @RichLewis007
# Description: Application entry point for Target Sweeper. Loads settings, configures logging,
#              runs the sweep behind a live status line and maps the outcome to an exit code.

from __future__ import annotations

import logging
import sys

from tqdm.contrib.logging import logging_redirect_tqdm

from .cli import RunOptions, build_parser, resolve_options
from .services import config as config_service
from .services import logger as logger_service
from .services.observer import Status
from .views.status_line import StatusLine
from .workers.pool import clean_dir

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def run(options: RunOptions, *, show_progress: bool = True) -> bool:
    # Sweep the requested tree and return True when nothing failed.
    logger = logging.getLogger(__name__)
    with logging_redirect_tqdm(), StatusLine(enabled=show_progress) as status_line:
        status = Status(on_message=status_line.set_message)
        success = clean_dir(
            options.directory,
            options.concurrency,
            status,
            markers=options.markers,
            use_trash=options.use_trash,
            dry_run=options.dry_run,
        )
        status_line.finish(status.message)

    totals = status.snapshot()
    verb = "would be removed" if options.dry_run else "removed"
    logger.info(
        "%d directories scanned, %d %s, %d errors",
        totals.scanned,
        totals.removed,
        verb,
        totals.errors,
    )
    return success


def main(argv: list[str] | None = None) -> int:
    # Entry point for console scripts.
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = config_service.load_settings()
    except config_service.SettingsError as exc:
        parser.error(str(exc))

    options = resolve_options(parser, args, settings)

    config_service.ensure_app_dirs()
    log_path = logger_service.configure(log_level=options.log_level)
    logger = logging.getLogger(__name__)
    logger.debug("Starting with argv=%s, log file at %s", argv, log_path)

    success = run(options, show_progress=sys.stderr.isatty())
    return EXIT_SUCCESS if success else EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
