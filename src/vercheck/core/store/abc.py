"""Abstract base class for version record storage."""

from abc import ABC, abstractmethod

from vercheck.core.store.types import PersistedStatus, VersionRecord


class VersionStore(ABC):
    """Durable map from repository identifier to its VersionRecord.

    All implementations (real and fake) must implement this interface. Backend
    failures on any operation are raised as StoreUnavailableError.
    """

    @abstractmethod
    def get(self, repo: str) -> VersionRecord:
        """Get the persisted record for a repository.

        Args:
            repo: Repository identifier ("owner/name")

        Returns:
            The stored record, or VersionRecord.empty(repo) if none exists.
            Never raises for a missing key.
        """
        ...

    @abstractmethod
    def put(self, repo: str, version: str, status: PersistedStatus) -> int:
        """Write or overwrite the record for a repository.

        The current time becomes ``last_checked``. The write is a single upsert
        so readers never observe a partial record.

        Args:
            repo: Repository identifier
            version: Normalized version, or "" for a failed fetch
            status: Persisted status

        Returns:
            The timestamp stored as ``last_checked``
        """
        ...

    @abstractmethod
    def max_last_checked_where_status_ok(self) -> int | None:
        """Most recent ``last_checked`` among OK records, or None if there are none.

        Records whose ``last_checked`` is not a non-negative integer are ignored.
        """
        ...

    @abstractmethod
    def list_records(self) -> list[VersionRecord]:
        """All stored records ordered by repository identifier."""
        ...

    def close(self) -> None:
        """Release any underlying resources. Default is a no-op."""
        return None
