"""Type definitions for the version store."""

from dataclasses import dataclass
from typing import Literal

PersistedStatus = Literal["OK", "FAILED"]

STATUS_OK: PersistedStatus = "OK"
STATUS_FAILED: PersistedStatus = "FAILED"


@dataclass(frozen=True)
class VersionRecord:
    """Last known state of one upstream repository."""

    repo: str
    version: str  # Normalized version, "" after a failed fetch
    # Seconds since epoch of the last write. None when never checked. Values read
    # back from storage are not coerced, so a corrupt row can carry a string here.
    last_checked: int | str | None
    status: str  # "OK", "FAILED", or "" when no record exists

    @staticmethod
    def empty(repo: str) -> "VersionRecord":
        """Record returned for a repository that has never been processed."""
        return VersionRecord(repo=repo, version="", last_checked=None, status="")

    @property
    def exists(self) -> bool:
        return self.last_checked is not None or self.status != ""


class StoreUnavailableError(Exception):
    """Raised when the backing store cannot be opened or initialized."""
