"""Date resolution: try each provider for a media kind in priority order."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Mapping, Optional, Sequence

from media_organizer.errors import DateResolutionError, DateUnavailable
from media_organizer.metadata import (
    DateProvider,
    ExifDateProvider,
    ModificationTimeProvider,
)
from media_organizer.models import MediaKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    """The chosen timestamp plus every provider attempt that failed first."""

    timestamp: datetime
    provider: str
    failures: list[tuple[str, Exception]] = field(default_factory=list)

    @property
    def fell_back(self) -> bool:
        return bool(self.failures)


def default_chains() -> dict[MediaKind, list[DateProvider]]:
    """Images: EXIF then mtime. Videos and everything else: mtime only."""
    mtime = ModificationTimeProvider()
    return {
        MediaKind.IMAGE: [ExifDateProvider(), mtime],
        MediaKind.VIDEO: [mtime],
        MediaKind.OTHER: [mtime],
    }


class DateResolver:
    """Resolves one timestamp per file and never substitutes "now" itself.

    When every provider fails, DateResolutionError is raised with each
    provider's original exception; the caller decides the final fallback.
    """

    def __init__(
        self,
        chains: Optional[Mapping[MediaKind, Sequence[DateProvider]]] = None,
    ) -> None:
        self.chains = dict(chains) if chains is not None else default_chains()

    def resolve(self, path: Path, kind: MediaKind) -> Resolution:
        failures: list[tuple[str, Exception]] = []

        for provider in self.chains.get(kind, []):
            try:
                timestamp = provider.date_for(path)
            except DateUnavailable as e:
                failures.append((provider.name, e))
                continue
            return Resolution(timestamp, provider.name, failures)

        raise DateResolutionError(path, failures)
