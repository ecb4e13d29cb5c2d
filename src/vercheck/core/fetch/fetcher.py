"""Version fetching and normalization."""

import logging
import re

from vercheck.core.fetch.registry import StrategyRegistry

logger = logging.getLogger(__name__)

# Tool-specific tag prefixes: "vim-9.1", "vvm-2.0"
_TOOL_PREFIX = re.compile(r"^v[iv]m-")
_JQ_PREFIX = "jq-"


def normalize_version(raw: str) -> str:
    """Strip tag-naming prefixes from a raw version string.

    A ``v[iv]m-`` tool prefix or, failing that, a single leading "v" is removed,
    then a leading "jq-". Each prefix is stripped at most once.

        normalize_version("v2.3.0") == "2.3.0"
        normalize_version("jq-1.7") == "1.7"
        normalize_version("vim-9.1") == "9.1"
    """
    version = raw.strip()
    if _TOOL_PREFIX.match(version):
        version = _TOOL_PREFIX.sub("", version, count=1)
    elif version.startswith("v"):
        version = version[1:]
    if version.startswith(_JQ_PREFIX):
        version = version[len(_JQ_PREFIX) :]
    return version


class VersionFetcher:
    """Resolves a repository's normalized latest version via its strategy."""

    def __init__(self, registry: StrategyRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> StrategyRegistry:
        return self._registry

    def fetch(self, repo: str) -> str | None:
        """Fetch and normalize the latest version of ``repo``.

        Returns:
            Normalized version, or None when the strategy found nothing, returned
            the literal "null", or the result is empty after normalization
        """
        strategy = self._registry.strategy_for(repo)
        logger.debug("Fetching %s with %s", repo, strategy.name)
        raw = strategy.fetch(repo)
        if not raw or raw == "null":
            return None
        version = normalize_version(raw)
        return version or None
