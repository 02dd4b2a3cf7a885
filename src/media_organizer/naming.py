"""Archive layout and collision-free, timestamp-based file names."""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from media_organizer.config import IMAGES_DIRNAME, TIMESTAMP_FORMAT, VIDEOS_DIRNAME
from media_organizer.models import MediaKind


def format_timestamp(timestamp: datetime) -> str:
    """DD-MM-YYYY-HH-MM-SS, second resolution."""
    return timestamp.strftime(TIMESTAMP_FORMAT)


def destination_dir(root: Path, kind: MediaKind, timestamp: datetime) -> Path:
    """<root>/<images|videos>/<YYYY>/<MM> for a media kind."""
    if kind == MediaKind.IMAGE:
        top = IMAGES_DIRNAME
    elif kind == MediaKind.VIDEO:
        top = VIDEOS_DIRNAME
    else:
        raise ValueError(f"No archive folder for {kind.value} files")
    return root / top / f"{timestamp.year:04d}" / f"{timestamp.month:02d}"


class NameAllocator:
    """Hands out file names unique within one run.

    The first file for a given second gets the bare timestamp, later ones
    get -01, -02, ... in the order they are requested. When a directory is
    given, names already present on disk are skipped unless the file there
    is the one being placed.
    """

    def __init__(self, exists: Callable[[Path], bool] = os.path.lexists) -> None:
        self.exists = exists
        self.counters: dict[str, int] = {}
        self._issued: dict[str, set[int]] = {}

    def allocate(
        self,
        timestamp: datetime,
        extension: str,
        directory: Optional[Path] = None,
        source: Optional[Path] = None,
    ) -> str:
        stamp = format_timestamp(timestamp)
        issued = self._issued.setdefault(stamp, set())

        index = 0
        while index in issued or self._occupied(directory, _name(stamp, index, extension), source):
            index += 1

        issued.add(index)
        self.counters[stamp] = len(issued)
        return _name(stamp, index, extension)

    def _occupied(self, directory: Optional[Path], name: str, source: Optional[Path]) -> bool:
        if directory is None:
            return False
        candidate = directory / name
        if not self.exists(candidate):
            return False
        return source is None or candidate.resolve() != source.resolve()


def _name(stamp: str, index: int, extension: str) -> str:
    if index > 0:
        return f"{stamp}-{index:02d}{extension}"
    return f"{stamp}{extension}"
