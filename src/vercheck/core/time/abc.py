"""Clock abstraction for testing.

Every timestamp the checker records or compares comes from a ``Time``
instance, so tests can pin "now" without patching the ``time`` module.
"""

from abc import ABC, abstractmethod


class Time(ABC):
    """Abstract clock for dependency injection."""

    @abstractmethod
    def now(self) -> int:
        """Return the current time as whole seconds since the epoch."""
        ...
