"""Lookup table from repository identifier to fetch strategy."""

from collections.abc import Iterable, Mapping

from vercheck.core.fetch.abc import FetchStrategy

# Projects that tag releases but do not publish them as GitHub releases
DEFAULT_TAG_LISTING_REPOS = ("git/git", "python/cpython")


class StrategyRegistry:
    """Exact-match overrides with a designated default strategy."""

    def __init__(
        self,
        default: FetchStrategy,
        overrides: Mapping[str, FetchStrategy] | None = None,
    ) -> None:
        self._default = default
        self._overrides = dict(overrides or {})

    @property
    def default(self) -> FetchStrategy:
        return self._default

    @property
    def overrides(self) -> dict[str, FetchStrategy]:
        return dict(self._overrides)

    def strategy_for(self, repo: str) -> FetchStrategy:
        return self._overrides.get(repo, self._default)

    def uses_default(self, repo: str) -> bool:
        return repo not in self._overrides

    def any_uses_default(self, repos: Iterable[str]) -> bool:
        return any(self.uses_default(repo) for repo in repos)

    def with_override(self, repo: str, strategy: FetchStrategy) -> "StrategyRegistry":
        """Return a new registry that routes ``repo`` to ``strategy``."""
        overrides = dict(self._overrides)
        overrides[repo] = strategy
        return StrategyRegistry(self._default, overrides)


def build_registry(
    default: FetchStrategy,
    tag_listing: FetchStrategy,
    tag_listing_repos: Iterable[str],
) -> StrategyRegistry:
    """Registry that routes ``tag_listing_repos`` to ``tag_listing``."""
    return StrategyRegistry(default, {repo: tag_listing for repo in tag_listing_repos})
