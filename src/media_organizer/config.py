"""Configuration constants and runtime config dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet

IMAGE_EXTENSIONS: FrozenSet[str] = frozenset({
    ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tiff", ".webp",
})

VIDEO_EXTENSIONS: FrozenSet[str] = frozenset({
    ".mp4", ".avi", ".mov", ".mkv", ".vob",
    ".flv", ".wmv", ".webm", ".mpg",
})

MEDIA_EXTENSIONS: FrozenSet[str] = IMAGE_EXTENSIONS | VIDEO_EXTENSIONS

IMAGES_DIRNAME: str = "images"
VIDEOS_DIRNAME: str = "videos"

TIMESTAMP_FORMAT: str = "%d-%m-%Y-%H-%M-%S"  # DD-MM-YYYY-HH-MM-SS
EXIF_DATE_FORMAT: str = "%Y:%m:%d %H:%M:%S"

HASH_CHUNK_SIZE: int = 65536  # 64 KB


@dataclass(frozen=True)
class OrganizerConfig:
    """Immutable runtime configuration assembled from CLI args."""

    source: Path
    destination: Path
    dry_run: bool
    verbose: bool = False
    log_dir: Path = Path(".")
