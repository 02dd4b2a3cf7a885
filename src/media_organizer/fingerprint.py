"""SHA256 content fingerprints used as the duplicate-detection key."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path

from media_organizer.config import HASH_CHUNK_SIZE

logger = logging.getLogger(__name__)


def sha256_file(path: Path) -> str:
    """Compute SHA256 hex digest of a file, reading in chunks."""
    h = hashlib.sha256()
    with open(path, "rb") as f:
        while chunk := f.read(HASH_CHUNK_SIZE):
            h.update(chunk)
    return h.hexdigest()


class ContentFingerprinter:
    """Hashes the full byte content of a file. OSError propagates."""

    def fingerprint(self, path: Path) -> str:
        digest = sha256_file(path)
        logger.debug(f"sha256 {digest[:12]} {path}")
        return digest
