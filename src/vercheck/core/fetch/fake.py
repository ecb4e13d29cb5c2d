"""Fake fetch strategy for testing."""

from vercheck.core.fetch.abc import FetchStrategy


class FakeFetchStrategy(FetchStrategy):
    """In-memory strategy returning pre-configured raw versions.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(
        self,
        *,
        results: dict[str, str | None] | None = None,
        name: str = "fake",
    ) -> None:
        """Create FakeFetchStrategy.

        Args:
            results: Mapping of repo -> raw version. Missing repos return None.
            name: Strategy name reported by the ``name`` property
        """
        self._results = results or {}
        self._name = name
        self._fetch_calls: list[str] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def fetch_calls(self) -> list[str]:
        """Repos passed to fetch(), in call order. For test assertions only."""
        return self._fetch_calls

    def fetch(self, repo: str) -> str | None:
        self._fetch_calls.append(repo)
        return self._results.get(repo)
