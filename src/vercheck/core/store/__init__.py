from vercheck.core.store.abc import VersionStore
from vercheck.core.store.fake import FakeVersionStore
from vercheck.core.store.sqlite import SqliteVersionStore
from vercheck.core.store.types import (
    STATUS_FAILED,
    STATUS_OK,
    PersistedStatus,
    StoreUnavailableError,
    VersionRecord,
)

__all__ = [
    "STATUS_FAILED",
    "STATUS_OK",
    "FakeVersionStore",
    "PersistedStatus",
    "SqliteVersionStore",
    "StoreUnavailableError",
    "VersionRecord",
    "VersionStore",
]
