"""Logging configuration for media-organizer."""

import logging
import sys
from datetime import datetime
from pathlib import Path

PACKAGE_LOGGER = "media_organizer"


def new_run_id() -> str:
    """Identifier for one invocation, e.g. 'media-organizer_20260216_143022'."""
    return f"media-organizer_{datetime.now().strftime('%Y%m%d_%H%M%S')}"


def _console_handler(verbose: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)-7s] %(message)s",
        datefmt="%H:%M:%S",
    ))
    return handler


def _file_handler(log_file: Path) -> logging.Handler:
    handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s",
    ))
    return handler


def setup_logging(verbose: bool = False, log_dir: Path = Path(".")) -> str:
    """Send package logs to stdout and to ``<log_dir>/<run_id>.log``.

    Every move, duplicate and error line of a run ends up in that file at
    DEBUG level. Handlers from an earlier call are closed and replaced.
    Returns the run id, which the CLI prints in its header and summary so
    console output can be matched to its log file.
    """
    run_id = new_run_id()

    pkg = logging.getLogger(PACKAGE_LOGGER)
    pkg.setLevel(logging.DEBUG)
    for handler in list(pkg.handlers):
        pkg.removeHandler(handler)
        handler.close()

    pkg.addHandler(_console_handler(verbose))
    log_dir.mkdir(parents=True, exist_ok=True)
    pkg.addHandler(_file_handler(log_dir / f"{run_id}.log"))

    return run_id
