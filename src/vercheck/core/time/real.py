"""Real clock backed by time.time()."""

import time

from vercheck.core.time.abc import Time


class RealTime(Time):
    """Production implementation using the system clock."""

    def now(self) -> int:
        return int(time.time())
