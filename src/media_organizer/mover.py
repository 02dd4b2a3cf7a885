"""Move files into the archive: atomic rename, else copy then delete."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Optional

from media_organizer.errors import TransferError

logger = logging.getLogger(__name__)


class LocalFilesystem:
    """The filesystem calls Transfer and the pipeline rely on.

    Swapped out in tests to simulate cross-device renames and I/O failures.
    """

    def makedirs(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def rename(self, src: Path, dest: Path) -> None:
        os.rename(src, dest)

    def copy(self, src: Path, dest: Path) -> None:
        shutil.copy2(str(src), str(dest))

    def remove(self, path: Path) -> None:
        os.remove(path)

    def exists(self, path: Path) -> bool:
        return os.path.lexists(path)


class Transfer:
    """Relocates one file, degrading to copy + delete when rename fails."""

    def __init__(self, filesystem: Optional[LocalFilesystem] = None) -> None:
        self.fs = filesystem or LocalFilesystem()

    def move(self, src: Path, dest: Path) -> str:
        """Move ``src`` to ``dest``. Returns "rename", "copy" or "in-place".

        An existing file at ``dest`` is never replaced.
        """
        if dest.resolve() == src.resolve():
            return "in-place"
        if self.fs.exists(dest):
            raise TransferError(f"Refusing to overwrite {dest}", src, dest)

        try:
            self.fs.makedirs(dest.parent)
        except OSError as e:
            raise TransferError(
                f"Cannot create {dest.parent}: {e}", src, dest,
            ) from e

        try:
            self.fs.rename(src, dest)
            return "rename"
        except OSError as e:
            # Typically EXDEV: destination is on another volume
            logger.debug(f"rename failed ({e}), copying {src} -> {dest}")

        try:
            self.fs.copy(src, dest)
        except OSError as e:
            raise TransferError(f"Cannot copy {src} -> {dest}: {e}", src, dest) from e

        try:
            self.fs.remove(src)
        except OSError as e:
            raise TransferError(
                f"Copied {src} -> {dest} but cannot remove source: {e}",
                src, dest, partial=True,
            ) from e

        return "copy"
