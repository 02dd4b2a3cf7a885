"""Exception hierarchy for media-organizer."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from media_organizer.models import RunSummary


class OrganizerError(Exception):
    """Base error for the project."""


class DateUnavailable(OrganizerError):
    """A single date provider could not produce a timestamp."""


class DateResolutionError(OrganizerError):
    """Every provider in a resolution chain failed."""

    def __init__(self, path: Path, failures: list[tuple[str, Exception]]) -> None:
        self.path = path
        self.failures = failures
        detail = "; ".join(f"{name}: {exc}" for name, exc in failures)
        super().__init__(f"no date for {path} ({detail or 'no providers'})")


class TransferError(OrganizerError):
    """Moving a file into the archive failed.

    ``partial`` is True when the destination copy was written but the
    source could not be removed afterwards.
    """

    def __init__(
        self,
        message: str,
        source: Path,
        destination: Path,
        partial: bool = False,
    ) -> None:
        super().__init__(message)
        self.source = source
        self.destination = destination
        self.partial = partial


class OrganizeAborted(OrganizerError):
    """A fatal error stopped the walk. Files already placed stay in place."""

    def __init__(
        self,
        path: Path,
        summary: "RunSummary",
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(f"aborted at {path}: {cause}")
        self.path = path
        self.summary = summary
