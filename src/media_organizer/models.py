"""Core data types used throughout the media-organizer pipeline."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional


class MediaKind(enum.Enum):
    IMAGE = "image"
    VIDEO = "video"
    OTHER = "other"


class Outcome(enum.Enum):
    """What happened to one file."""

    MOVED = "moved"
    DUPLICATE = "duplicate"  # Same content already seen this run
    PLANNED = "planned"  # Dry-run: would have been moved
    ERROR = "error"


@dataclass
class FileRecord:
    """A file being processed. Filled in as it moves through the pipeline."""

    path: Path
    kind: MediaKind
    extension: str  # lowercased, includes dot
    fingerprint: Optional[str] = None
    timestamp: Optional[datetime] = None
    destination: Optional[Path] = None


@dataclass(frozen=True)
class OrganizeResult:
    """Outcome of processing one file."""

    outcome: Outcome
    source: Path
    destination: Optional[Path] = None  # MOVED / PLANNED
    original: Optional[Path] = None  # DUPLICATE: first file with this content
    error: Optional[BaseException] = None  # ERROR

    def describe(self) -> str:
        """One human-readable line for the console."""
        if self.outcome == Outcome.MOVED:
            return f"Moved and renamed: {self.source} -> {self.destination}"
        if self.outcome == Outcome.PLANNED:
            return (
                f"Dry-run: File would be moved and renamed: "
                f"{self.source} -> {self.destination}"
            )
        if self.outcome == Outcome.DUPLICATE:
            return f"Duplicate file found: {self.source} (duplicate of {self.original})"
        return f"Error processing {self.source}: {self.error}"


@dataclass
class RunSummary:
    """Summary counters for a completed (or aborted) pipeline run."""

    files_seen: int = 0
    files_ignored: int = 0
    files_moved: int = 0
    files_planned: int = 0
    duplicates: int = 0
    duplicates_deleted: int = 0
    date_fallbacks: int = 0
    errors: int = 0
    dry_run: bool = False
    results: list[OrganizeResult] = field(default_factory=list)

    def record(self, result: OrganizeResult) -> None:
        self.results.append(result)
        if result.outcome == Outcome.MOVED:
            self.files_moved += 1
        elif result.outcome == Outcome.PLANNED:
            self.files_planned += 1
        elif result.outcome == Outcome.DUPLICATE:
            self.duplicates += 1
        else:
            self.errors += 1
