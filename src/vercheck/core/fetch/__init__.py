from vercheck.core.fetch.abc import FetchStrategy
from vercheck.core.fetch.fake import FakeFetchStrategy
from vercheck.core.fetch.fetcher import VersionFetcher, normalize_version
from vercheck.core.fetch.registry import (
    DEFAULT_TAG_LISTING_REPOS,
    StrategyRegistry,
    build_registry,
)
from vercheck.core.fetch.releases import ReleasesApiStrategy
from vercheck.core.fetch.tags import TagListingStrategy, select_latest_tag

__all__ = [
    "DEFAULT_TAG_LISTING_REPOS",
    "FakeFetchStrategy",
    "FetchStrategy",
    "ReleasesApiStrategy",
    "StrategyRegistry",
    "TagListingStrategy",
    "VersionFetcher",
    "build_registry",
    "normalize_version",
    "select_latest_tag",
]
