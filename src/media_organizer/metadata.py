"""Date providers: embedded EXIF via Pillow, and filesystem modification time."""

from __future__ import annotations

import abc
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from PIL import Image

from media_organizer.config import EXIF_DATE_FORMAT
from media_organizer.errors import DateUnavailable

logger = logging.getLogger(__name__)

EXIF_IFD_POINTER = 0x8769
DATETIME_ORIGINAL = 0x9003  # 36867
DATETIME_DIGITIZED = 0x9004  # 36868
DATETIME = 0x0132  # 306, IFD0


def parse_exif_datetime(value: Any) -> Optional[datetime]:
    """Parse an EXIF 'YYYY:MM:DD HH:MM:SS' value, or None if unusable."""
    if isinstance(value, bytes):
        value = value.decode("ascii", errors="ignore")
    if not isinstance(value, str):
        return None
    value = value.strip("\x00 ")
    if not value or value.startswith("0000:00:00"):
        return None
    try:
        return datetime.strptime(value[:19], EXIF_DATE_FORMAT)
    except ValueError:
        return None


def pick_exif_datetime(exif: Any) -> Optional[datetime]:
    """Return the best date-taken from a Pillow Exif mapping.

    Priority: DateTimeOriginal, DateTimeDigitized (Exif IFD), then the
    IFD0 DateTime written by most editors.
    """
    sub_ifd = exif.get_ifd(EXIF_IFD_POINTER) or {}
    for tag in (DATETIME_ORIGINAL, DATETIME_DIGITIZED):
        parsed = parse_exif_datetime(sub_ifd.get(tag))
        if parsed is not None:
            return parsed
    return parse_exif_datetime(exif.get(DATETIME))


class DateProvider(abc.ABC):
    """Produces a timestamp for a file, or raises DateUnavailable."""

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Short identifier used in log lines."""
        ...

    @abc.abstractmethod
    def date_for(self, path: Path) -> datetime:
        ...


class ExifDateProvider(DateProvider):
    """Date taken from the image's embedded EXIF block."""

    @property
    def name(self) -> str:
        return "exif"

    def date_for(self, path: Path) -> datetime:
        try:
            with open(path, "rb") as handle, Image.open(handle) as img:
                taken = pick_exif_datetime(img.getexif())
        except Exception as e:
            raise DateUnavailable(f"cannot decode EXIF in {path}: {e}") from e

        if taken is None:
            raise DateUnavailable(f"no EXIF date in {path}")
        logger.debug(f"EXIF date {taken} for {path}")
        return taken


class ModificationTimeProvider(DateProvider):
    @property
    def name(self) -> str:
        return "mtime"

    def date_for(self, path: Path) -> datetime:
        try:
            return datetime.fromtimestamp(path.stat().st_mtime)
        except OSError as e:
            raise DateUnavailable(f"cannot stat {path}: {e}") from e
