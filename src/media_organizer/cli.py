"""CLI argument parsing, validation, and main entry point."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Callable, Optional

from media_organizer import __version__
from media_organizer.config import OrganizerConfig
from media_organizer.errors import OrganizeAborted
from media_organizer.logging_setup import setup_logging
from media_organizer.models import RunSummary

logger = logging.getLogger("media_organizer")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="media-organizer",
        description=(
            "Move photos and videos into a deduplicated "
            "images|videos/YYYY/MM archive named by capture time."
        ),
    )
    parser.add_argument(
        "--source",
        type=Path,
        default=None,
        help="Source directory to recursively scan (prompted for if omitted).",
    )
    parser.add_argument(
        "--destination",
        type=Path,
        default=None,
        help="Existing archive directory (prompted for if omitted).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report planned moves and duplicates without changing anything.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG-level) console output.",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Directory for log files (default: current directory).",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def prompt_missing(
    args: argparse.Namespace,
    ask: Callable[[str], str] = input,
) -> None:
    """Interactively fill in source/destination when they were not given."""
    if args.source is not None and args.destination is not None:
        return
    if not args.dry_run:
        args.dry_run = ask("Dry-run (yes/no): ").strip().lower() == "yes"
    if args.source is None:
        args.source = Path(ask("Enter source directory: ").strip())
    if args.destination is None:
        args.destination = Path(ask("Enter target directory: ").strip())


def _validate_args(args: argparse.Namespace) -> None:
    if not args.source.is_dir():
        raise SystemExit(f"Error: Source directory does not exist: {args.source}")
    if not args.destination.is_dir():
        raise SystemExit(f"Error: Target directory does not exist: {args.destination}")


def _log_summary(summary: RunSummary, run_id: str) -> None:
    logger.info("=" * 60)
    logger.info(f"Summary ({run_id}):")
    logger.info(f"  Media files:  {summary.files_seen}")
    logger.info(f"  Ignored:      {summary.files_ignored}")
    if summary.dry_run:
        logger.info(f"  Planned:      {summary.files_planned}")
    else:
        logger.info(f"  Moved:        {summary.files_moved}")
    logger.info(
        f"  Duplicates:   {summary.duplicates} "
        f"({summary.duplicates_deleted} deleted)"
    )
    logger.info(f"  Date fallbacks: {summary.date_fallbacks}")
    logger.info(f"  Errors:       {summary.errors}")
    if summary.dry_run:
        logger.info("  (DRY-RUN -- no files were changed)")
    logger.info("=" * 60)


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    prompt_missing(args)

    log_dir = (args.log_dir or Path(".")).resolve()
    run_id = setup_logging(verbose=args.verbose, log_dir=log_dir)

    _validate_args(args)

    config = OrganizerConfig(
        source=args.source.resolve(),
        destination=args.destination.resolve(),
        dry_run=args.dry_run,
        verbose=args.verbose,
        log_dir=log_dir,
    )

    logger.info("=" * 60)
    logger.info(f"media-organizer v{__version__}")
    logger.info(f"  Source Directory: {config.source}")
    logger.info(f"  Target Directory: {config.destination}")
    logger.info(f"  Dry Run:          {config.dry_run}")
    logger.info(f"  Log file:         {config.log_dir / f'{run_id}.log'}")
    logger.info("=" * 60)

    from media_organizer.pipeline import OrganizePipeline

    try:
        summary = OrganizePipeline(config).run()
    except OrganizeAborted as e:
        logger.error(f"Error processing files: {e}")
        _log_summary(e.summary, run_id)
        raise SystemExit(1)

    _log_summary(summary, run_id)
    raise SystemExit(0)
