"""Fake Time implementation for testing.

FakeTime returns a fixed instant that only moves when a test advances it.
"""

from vercheck.core.time.abc import Time


class FakeTime(Time):
    """In-memory clock that never moves on its own.

    This class has NO public setup methods besides ``advance``. The starting
    instant is provided via the constructor.
    """

    def __init__(self, current: int = 1_700_000_000) -> None:
        """Create FakeTime pinned at ``current`` seconds since the epoch."""
        self._current = current

    def now(self) -> int:
        return self._current

    def advance(self, seconds: int) -> None:
        """Move the clock forward by ``seconds``."""
        self._current += seconds
