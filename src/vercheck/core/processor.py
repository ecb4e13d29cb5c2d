"""Per-repository orchestration of cache lookup, live fetch and recording.

This is the only place where a repository moves between the OK, FAILED and
cached-stale states. Given the same stored record, ``now`` and fetch outcome,
``process`` always produces the same result and the same store writes.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Literal

from vercheck.core.cache_policy import DEFAULT_CACHE_DURATION, fresh_check_time
from vercheck.core.fetch.fetcher import VersionFetcher
from vercheck.core.repo_list import RepoEntry
from vercheck.core.store.abc import VersionStore
from vercheck.core.store.types import STATUS_FAILED, STATUS_OK

logger = logging.getLogger(__name__)

StatusLabel = Literal[
    "OK (Cached)",
    "Stale (Failed Last)",
    "OK (Live)",
    "FAILED (Once)",
    "FAILED (Again)",
]
Severity = Literal["success", "warning", "error"]

MISSING_VERSION = "N/A"


@dataclass(frozen=True)
class ProcessedResult:
    """Classified outcome for one repository, recomputed every run."""

    repo: str
    version_to_print: str
    status_label: StatusLabel
    severity: Severity
    effective_timestamp: int


class RepositoryProcessor:
    """Combines the store, cache policy and fetcher for each repository."""

    def __init__(
        self,
        store: VersionStore,
        fetcher: VersionFetcher,
        cache_duration: int = DEFAULT_CACHE_DURATION,
    ) -> None:
        self._store = store
        self._fetcher = fetcher
        self._cache_duration = cache_duration

    def process(self, repo: str, now: int) -> ProcessedResult:
        """Resolve the version of ``repo`` and classify the outcome.

        On a cache hit nothing is written. On a cache miss exactly one record is
        written, stamped with the store's current time, and that timestamp is
        the result's effective timestamp.

        Args:
            repo: Repository identifier
            now: Time used for the cache freshness decision

        Returns:
            ProcessedResult for rendering
        """
        cached = self._store.get(repo)

        checked_at = fresh_check_time(
            cached.version, cached.last_checked, now, self._cache_duration
        )
        if checked_at is not None:
            if cached.status == STATUS_FAILED:
                return ProcessedResult(
                    repo=repo,
                    version_to_print=cached.version,
                    status_label="Stale (Failed Last)",
                    severity="warning",
                    effective_timestamp=checked_at,
                )
            return ProcessedResult(
                repo=repo,
                version_to_print=cached.version,
                status_label="OK (Cached)",
                severity="success",
                effective_timestamp=checked_at,
            )

        live_version = self._fetcher.fetch(repo)
        if live_version is not None:
            checked_at = self._store.put(repo, live_version, STATUS_OK)
            return ProcessedResult(
                repo=repo,
                version_to_print=live_version,
                status_label="OK (Live)",
                severity="success",
                effective_timestamp=checked_at,
            )

        logger.debug("Failed to fetch version for %s", repo)
        checked_at = self._store.put(repo, "", STATUS_FAILED)
        version_to_print = cached.version or MISSING_VERSION
        if cached.status == STATUS_FAILED:
            return ProcessedResult(
                repo=repo,
                version_to_print=version_to_print,
                status_label="FAILED (Again)",
                severity="error",
                effective_timestamp=checked_at,
            )
        return ProcessedResult(
            repo=repo,
            version_to_print=version_to_print,
            status_label="FAILED (Once)",
            severity="warning",
            effective_timestamp=checked_at,
        )

    def process_all(
        self, entries: Iterable[RepoEntry], now: int
    ) -> Iterator[tuple[RepoEntry, ProcessedResult]]:
        """Process entries one at a time in input order."""
        for entry in entries:
            yield entry, self.process(entry.repo, now)
