"""Recursive file discovery and extension-based classification."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator, Optional

from media_organizer.config import IMAGE_EXTENSIONS, VIDEO_EXTENSIONS
from media_organizer.models import MediaKind

logger = logging.getLogger(__name__)


def classify(path: Path) -> MediaKind:
    ext = path.suffix.lower()
    if ext in IMAGE_EXTENSIONS:
        return MediaKind.IMAGE
    if ext in VIDEO_EXTENSIONS:
        return MediaKind.VIDEO
    return MediaKind.OTHER


def walk_files(source: Path, exclude: Optional[Path] = None) -> Iterator[Path]:
    """Yield every regular file under ``source``, depth-first, in lexical order.

    ``exclude`` is a directory that is never descended into (the archive
    root when it lives inside the source tree).
    """
    excluded = exclude.resolve() if exclude is not None else None

    def _raise(err: OSError) -> None:
        raise err

    for root, dirs, files in os.walk(source, onerror=_raise):
        root_path = Path(root)
        if excluded is not None:
            dirs[:] = [d for d in dirs if (root_path / d).resolve() != excluded]
        dirs.sort()

        for filename in sorted(files):
            yield root_path / filename

    logger.debug(f"Finished walking {source}")
