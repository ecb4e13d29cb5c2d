"""Application context with dependency injection."""

from dataclasses import dataclass, replace

from vercheck.core.config import CheckerConfig
from vercheck.core.fetch.fetcher import VersionFetcher
from vercheck.core.fetch.registry import StrategyRegistry, build_registry
from vercheck.core.fetch.releases import ReleasesApiStrategy
from vercheck.core.fetch.tags import TagListingStrategy
from vercheck.core.processor import RepositoryProcessor
from vercheck.core.store.abc import VersionStore
from vercheck.core.store.sqlite import SqliteVersionStore
from vercheck.core.time.abc import Time
from vercheck.core.time.real import RealTime


@dataclass(frozen=True)
class VercheckContext:
    """Immutable context holding all dependencies for a checker run.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    config: CheckerConfig
    store: VersionStore
    registry: StrategyRegistry
    time: Time

    @property
    def fetcher(self) -> VersionFetcher:
        return VersionFetcher(self.registry)

    @property
    def processor(self) -> RepositoryProcessor:
        return RepositoryProcessor(self.store, self.fetcher, self.config.cache_duration)

    def with_config(self, config: CheckerConfig) -> "VercheckContext":
        """Copy of this context using ``config`` (store and registry are kept)."""
        return replace(self, config=config)

    def close(self) -> None:
        self.store.close()

    @staticmethod
    def for_test(
        config: CheckerConfig | None = None,
        store: VersionStore | None = None,
        registry: StrategyRegistry | None = None,
        time: Time | None = None,
    ) -> "VercheckContext":
        """Create test context with optional pre-configured integration classes.

        Args:
            config: Optional CheckerConfig. If None, uses CheckerConfig.defaults().
            store: Optional VersionStore. If None, creates empty FakeVersionStore
                   sharing the context's clock.
            registry: Optional StrategyRegistry. If None, every repo resolves
                      through an empty FakeFetchStrategy (all fetches fail).
            time: Optional Time. If None, creates FakeTime.

        Returns:
            VercheckContext configured with provided values and test defaults

        Example:
            >>> clock = FakeTime(current=10_000)
            >>> strategy = FakeFetchStrategy(results={"jqlang/jq": "jq-1.7.1"})
            >>> ctx = VercheckContext.for_test(
            ...     registry=StrategyRegistry(strategy),
            ...     store=FakeVersionStore(time=clock),
            ...     time=clock,
            ... )
        """
        from vercheck.core.fetch.fake import FakeFetchStrategy
        from vercheck.core.store.fake import FakeVersionStore
        from vercheck.core.time.fake import FakeTime

        if time is None:
            time = FakeTime()

        if store is None:
            store = FakeVersionStore(time=time)

        if registry is None:
            registry = StrategyRegistry(FakeFetchStrategy())

        if config is None:
            config = CheckerConfig.defaults()

        return VercheckContext(config=config, store=store, registry=registry, time=time)


def create_context(config: CheckerConfig) -> VercheckContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        config: Fully merged configuration

    Returns:
        VercheckContext backed by SQLite, the GitHub API and git

    Raises:
        StoreUnavailableError: If the version database cannot be opened
    """
    time = RealTime()
    store = SqliteVersionStore(config.db_path, time)
    default = ReleasesApiStrategy(config.github_token, timeout=config.http_timeout)
    tag_listing = TagListingStrategy(timeout=config.git_timeout)
    registry = build_registry(default, tag_listing, config.tag_listing_repos)
    return VercheckContext(config=config, store=store, registry=registry, time=time)
