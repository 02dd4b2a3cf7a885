"""Pipeline orchestrator: walk -> classify -> hash -> dedup -> date -> name -> move."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from media_organizer.config import OrganizerConfig
from media_organizer.errors import DateResolutionError, OrganizeAborted, TransferError
from media_organizer.fingerprint import ContentFingerprinter
from media_organizer.models import (
    FileRecord,
    MediaKind,
    OrganizeResult,
    Outcome,
    RunSummary,
)
from media_organizer.mover import LocalFilesystem, Transfer
from media_organizer.naming import NameAllocator, destination_dir
from media_organizer.resolver import DateResolver
from media_organizer.scanner import classify, walk_files

logger = logging.getLogger(__name__)


class OrganizePipeline:
    """One organize run over a source tree.

    Dedup state (``seen_hashes``) and collision counters (on the
    allocator) belong to this instance only; build a new pipeline per run.
    """

    def __init__(
        self,
        config: OrganizerConfig,
        fingerprinter: Optional[ContentFingerprinter] = None,
        resolver: Optional[DateResolver] = None,
        allocator: Optional[NameAllocator] = None,
        filesystem: Optional[LocalFilesystem] = None,
        transfer: Optional[Transfer] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.config = config
        self.fingerprinter = fingerprinter or ContentFingerprinter()
        self.resolver = resolver or DateResolver()
        self.fs = filesystem or LocalFilesystem()
        self.allocator = allocator or NameAllocator(exists=self.fs.exists)
        self.transfer = transfer or Transfer(self.fs)
        self.clock = clock
        self.seen_hashes: dict[str, Path] = {}
        self.placed: set[Path] = set()  # resolved destinations written this run
        self.summary = RunSummary(dry_run=config.dry_run)

    def run(self) -> RunSummary:
        """Process every file under the source. Raises OrganizeAborted on a fatal error."""
        logger.info(f"Walking {self.config.source}...")
        current = self.config.source
        try:
            for path in walk_files(self.config.source, exclude=self.config.destination):
                current = path
                self.process(path)
        except OrganizeAborted:
            raise
        except OSError as e:
            logger.error(f"Error walking {current}: {e}")
            raise OrganizeAborted(current, self.summary, e) from e

        return self.summary

    def process(self, path: Path) -> Optional[OrganizeResult]:
        """Handle a single file.

        Returns None for files that are not media and for files this run
        already placed (reached again when the archive sits in the source).
        """
        kind = classify(path)
        if kind == MediaKind.OTHER:
            logger.debug(f"Ignoring non-media file: {path}")
            self.summary.files_ignored += 1
            return None
        if path.resolve() in self.placed:
            # Archive lives inside the source and the walk reached a file we just placed
            logger.debug(f"Already placed this run: {path}")
            return None

        self.summary.files_seen += 1
        record = FileRecord(path=path, kind=kind, extension=path.suffix.lower())

        try:
            record.fingerprint = self.fingerprinter.fingerprint(path)
        except OSError as e:
            self._fail(record, e)

        original = self.seen_hashes.get(record.fingerprint)
        if original is not None:
            return self._duplicate(record, original)
        self.seen_hashes[record.fingerprint] = path

        record.timestamp = self._resolve_date(record)
        directory = destination_dir(self.config.destination, kind, record.timestamp)
        name = self.allocator.allocate(
            record.timestamp, record.extension, directory, source=path,
        )
        record.destination = directory / name

        if self.config.dry_run:
            return self._emit(OrganizeResult(
                Outcome.PLANNED, path, destination=record.destination,
            ))

        try:
            self.transfer.move(path, record.destination)
        except TransferError as e:
            if e.partial:
                logger.warning(f"Partial move, copy left at {e.destination}")
            self._fail(record, e)

        self.placed.add(record.destination.resolve())
        return self._emit(OrganizeResult(
            Outcome.MOVED, path, destination=record.destination,
        ))

    def _resolve_date(self, record: FileRecord) -> datetime:
        try:
            resolution = self.resolver.resolve(record.path, record.kind)
        except DateResolutionError as e:
            logger.warning(f"Error extracting date for file {record.path}: {e}")
            self.summary.date_fallbacks += 1
            return self.clock()

        if resolution.fell_back:
            for name, cause in resolution.failures:
                logger.debug(f"{name} date unavailable: {cause}")
            logger.debug(f"Using {resolution.provider} date for {record.path}")
            self.summary.date_fallbacks += 1
        return resolution.timestamp

    def _duplicate(self, record: FileRecord, original: Path) -> OrganizeResult:
        result = self._emit(OrganizeResult(
            Outcome.DUPLICATE, record.path, original=original,
        ))
        if self.config.dry_run:
            return result

        try:
            self.fs.remove(record.path)
        except OSError as e:
            logger.warning(f"Error deleting file {record.path}: {e}")
        else:
            logger.info(f"Deleted duplicate file: {record.path}")
            self.summary.duplicates_deleted += 1
        return result

    def _emit(self, result: OrganizeResult) -> OrganizeResult:
        self.summary.record(result)
        logger.info(result.describe())
        return result

    def _fail(self, record: FileRecord, error: Exception) -> None:
        result = OrganizeResult(Outcome.ERROR, record.path, error=error)
        self.summary.record(result)
        logger.error(result.describe())
        raise OrganizeAborted(record.path, self.summary, error) from error
