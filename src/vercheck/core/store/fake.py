"""Fake version store for testing.

FakeVersionStore is an in-memory implementation that accepts pre-configured
records in its constructor. Construct instances directly with keyword arguments.
"""

from vercheck.core.store.abc import VersionStore
from vercheck.core.store.types import STATUS_OK, PersistedStatus, VersionRecord
from vercheck.core.time.abc import Time
from vercheck.core.time.fake import FakeTime


class FakeVersionStore(VersionStore):
    """In-memory fake implementation of VersionStore.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(
        self,
        *,
        records: list[VersionRecord] | None = None,
        time: Time | None = None,
    ) -> None:
        """Create FakeVersionStore with pre-configured state.

        Args:
            records: Initial records, keyed by their ``repo`` field
            time: Clock used to stamp writes (defaults to a FakeTime)
        """
        self._records: dict[str, VersionRecord] = {r.repo: r for r in records or []}
        self._time = time if time is not None else FakeTime()
        self._put_calls: list[tuple[str, str, str]] = []
        self._closed = False

    @property
    def put_calls(self) -> list[tuple[str, str, str]]:
        """Get the list of put() calls as (repo, version, status) tuples.

        This property is for test assertions only.
        """
        return self._put_calls

    @property
    def closed(self) -> bool:
        return self._closed

    def get(self, repo: str) -> VersionRecord:
        return self._records.get(repo, VersionRecord.empty(repo))

    def put(self, repo: str, version: str, status: PersistedStatus) -> int:
        check_time = self._time.now()
        self._records[repo] = VersionRecord(
            repo=repo, version=version, last_checked=check_time, status=status
        )
        self._put_calls.append((repo, version, status))
        return check_time

    def max_last_checked_where_status_ok(self) -> int | None:
        stamps: list[int] = []
        for record in self._records.values():
            stamp = record.last_checked
            if record.status != STATUS_OK or isinstance(stamp, bool):
                continue
            if isinstance(stamp, int) and stamp >= 0:
                stamps.append(stamp)
        return max(stamps) if stamps else None

    def list_records(self) -> list[VersionRecord]:
        return [self._records[repo] for repo in sorted(self._records)]

    def close(self) -> None:
        self._closed = True
