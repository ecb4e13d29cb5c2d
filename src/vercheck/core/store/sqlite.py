"""SQLite-backed version store."""

import logging
import sqlite3
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from vercheck.core.store.abc import VersionStore
from vercheck.core.store.types import (
    STATUS_OK,
    PersistedStatus,
    StoreUnavailableError,
    VersionRecord,
)
from vercheck.core.time.abc import Time

logger = logging.getLogger(__name__)

CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS versions (
    repo TEXT PRIMARY KEY,
    version TEXT,
    last_checked INTEGER,
    status TEXT
)
"""
UPSERT_RECORD = (
    "INSERT OR REPLACE INTO versions (repo, version, last_checked, status) VALUES (?, ?, ?, ?)"
)
SELECT_RECORD = "SELECT version, last_checked, status FROM versions WHERE repo = ?"
# Rows with a non-integer stamp sort above every integer in SQLite, so skip them
SELECT_LAST_SUCCESS = (
    "SELECT MAX(last_checked) FROM versions WHERE status = ? "
    "AND typeof(last_checked) = 'integer' AND last_checked >= 0"
)
SELECT_ALL = "SELECT repo, version, last_checked, status FROM versions ORDER BY repo"


DEFAULT_BUSY_TIMEOUT = 5.0


class SqliteVersionStore(VersionStore):
    """Production store keeping one row per repository in a SQLite file.

    The connection runs in autocommit mode, so every ``put`` is its own
    transaction. Any SQLite failure after opening (a locked or corrupt
    database) surfaces as StoreUnavailableError.
    """

    def __init__(
        self, db_path: Path, time: Time, *, busy_timeout: float = DEFAULT_BUSY_TIMEOUT
    ) -> None:
        """Open (creating if needed) the database at ``db_path``.

        Args:
            db_path: Path to the SQLite file, or ":memory:"
            time: Clock used to stamp writes
            busy_timeout: Seconds to wait for another process's lock

        Raises:
            StoreUnavailableError: If the file or table cannot be created
        """
        self._db_path = db_path
        self._time = time
        try:
            if str(db_path) != ":memory:":
                db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(str(db_path), timeout=busy_timeout, isolation_level=None)
            self._conn.execute(CREATE_TABLE)
        except (sqlite3.Error, OSError) as e:
            raise StoreUnavailableError(f"Cannot open version database at {db_path}: {e}") from e
        logger.debug("Opened version database at %s", db_path)

    @property
    def db_path(self) -> Path:
        return self._db_path

    def _query(self, sql: str, params: Sequence[Any] = ()) -> list[tuple[Any, ...]]:
        try:
            return self._conn.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            raise StoreUnavailableError(f"Version database at {self._db_path} failed: {e}") from e

    def get(self, repo: str) -> VersionRecord:
        rows = self._query(SELECT_RECORD, (repo,))
        if not rows:
            return VersionRecord.empty(repo)
        version, last_checked, status = rows[0]
        return VersionRecord(
            repo=repo,
            version=version or "",
            last_checked=last_checked,
            status=status or "",
        )

    def put(self, repo: str, version: str, status: PersistedStatus) -> int:
        check_time = self._time.now()
        self._query(UPSERT_RECORD, (repo, version, check_time, status))
        return check_time

    def max_last_checked_where_status_ok(self) -> int | None:
        rows = self._query(SELECT_LAST_SUCCESS, (STATUS_OK,))
        if not rows or rows[0][0] is None:
            return None
        return rows[0][0]

    def list_records(self) -> list[VersionRecord]:
        return [
            VersionRecord(
                repo=repo,
                version=version or "",
                last_checked=last_checked,
                status=status or "",
            )
            for repo, version, last_checked, status in self._query(SELECT_ALL)
        ]

    def close(self) -> None:
        self._conn.close()
