"""Abstract base class for fetch strategies."""

from abc import ABC, abstractmethod


class FetchStrategy(ABC):
    """Resolves the raw latest version of a repository from some upstream source.

    Implementations never raise for transport, HTTP status or payload problems.
    Every such failure is logged for diagnostics and reported as None, so the
    only two outcomes a caller sees are a raw version string or None.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier used in debug logs."""
        ...

    @abstractmethod
    def fetch(self, repo: str) -> str | None:
        """Fetch the raw (un-normalized) latest version of ``repo``.

        Args:
            repo: Repository identifier ("owner/name")

        Returns:
            Raw tag name, or None if it could not be determined
        """
        ...
