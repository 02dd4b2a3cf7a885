"""Shared test fixtures."""

import os
from datetime import datetime
from pathlib import Path
from typing import Optional

import pytest
from PIL import Image

from media_organizer.config import OrganizerConfig


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    src = tmp_path / "source"
    src.mkdir()
    return src


@pytest.fixture
def dest_dir(tmp_path: Path) -> Path:
    dest = tmp_path / "destination"
    dest.mkdir()
    return dest


@pytest.fixture
def log_dir(tmp_path: Path) -> Path:
    d = tmp_path / "logs"
    d.mkdir()
    return d


@pytest.fixture
def make_config(source_dir, dest_dir, log_dir):
    """Factory fixture for creating OrganizerConfig with overrides."""

    def _make(**overrides):
        defaults = dict(
            source=source_dir,
            destination=dest_dir,
            dry_run=False,
            verbose=False,
            log_dir=log_dir,
        )
        defaults.update(overrides)
        return OrganizerConfig(**defaults)

    return _make


def write_jpeg(
    path: Path,
    taken: Optional[str] = None,
    color: tuple[int, int, int] = (200, 30, 30),
) -> Path:
    """Write a small real JPEG, optionally with an IFD0 DateTime tag."""
    img = Image.new("RGB", (8, 8), color)
    if taken is None:
        img.save(path, "JPEG")
    else:
        exif = Image.Exif()
        exif[0x0132] = taken
        img.save(path, "JPEG", exif=exif.tobytes())
    return path


def set_mtime(path: Path, when: datetime) -> Path:
    ts = when.timestamp()
    os.utime(path, (ts, ts))
    return path
