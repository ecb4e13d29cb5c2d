"""Fetch strategy that lists remote tags with ``git ls-remote``.

Used for projects that tag releases without publishing them as GitHub
releases. Parsing and selection are pure functions so they can be tested
without a network.
"""

import logging
import os
import re
from collections.abc import Iterable

from vercheck.core.fetch.abc import FetchStrategy
from vercheck.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)

GITHUB_URL = "https://github.com"
DEFAULT_GIT_TIMEOUT = 60.0

# Release candidates, alphas and betas: "v3.13.0rc2", "3.14.0a1", "2.0b"
PRERELEASE_PATTERN = re.compile(r"(rc|a|b)[0-9]*$")
DEREF_SUFFIX = "^{}"

_DIGIT_RUN = re.compile(r"([0-9]+)")


def tag_name_from_ref(ref: str) -> str:
    """Extract the tag name from an ``ls-remote`` line or a bare ref.

    Everything up to the last "/" is dropped and a trailing annotated-tag
    dereference marker is removed:

        "abc123\trefs/tags/v2.47.0^{}" -> "v2.47.0"
    """
    name = ref.strip().rsplit("/", 1)[-1]
    if name.endswith(DEREF_SUFFIX):
        name = name[: -len(DEREF_SUFFIX)]
    return name


def version_sort_key(tag: str) -> tuple[tuple[int, int, str], ...]:
    """Version-aware ordering key, digit runs compare numerically.

    Matches git's ``--sort=v:refname`` for ordinary tags, so "v1.10" sorts
    after "v1.9".
    """
    key: list[tuple[int, int, str]] = []
    for chunk in _DIGIT_RUN.split(tag):
        if not chunk:
            continue
        if _DIGIT_RUN.fullmatch(chunk):
            key.append((1, int(chunk), ""))
        else:
            key.append((0, 0, chunk))
    return tuple(key)


def is_prerelease(tag: str) -> bool:
    return PRERELEASE_PATTERN.search(tag) is not None


def select_latest_tag(refs: Iterable[str]) -> str | None:
    """Pick the greatest non-prerelease tag.

    Args:
        refs: ``ls-remote`` output lines or bare tag names

    Returns:
        The version-greatest tag, or None if none survive filtering
    """
    candidates = {tag_name_from_ref(ref) for ref in refs if ref.strip()}
    releases = [tag for tag in candidates if tag and not is_prerelease(tag)]
    if not releases:
        return None
    return max(releases, key=version_sort_key)


class TagListingStrategy(FetchStrategy):
    """Selects the newest release tag from ``git ls-remote --tags``."""

    def __init__(self, *, timeout: float = DEFAULT_GIT_TIMEOUT, base_url: str = GITHUB_URL) -> None:
        self._timeout = timeout
        self._base_url = base_url.rstrip("/")

    @property
    def name(self) -> str:
        return "git-ls-remote"

    def fetch(self, repo: str) -> str | None:
        url = f"{self._base_url}/{repo}"
        env = dict(os.environ)
        env["GIT_TERMINAL_PROMPT"] = "0"
        try:
            result = run_subprocess_with_context(
                ["git", "ls-remote", "--tags", url],
                operation_context=f"list tags of {repo}",
                timeout=self._timeout,
                env=env,
            )
        except (RuntimeError, OSError) as e:
            logger.debug("Tag listing failed for %s: %s", repo, e)
            return None

        tag = select_latest_tag(result.stdout.splitlines())
        if tag is None:
            logger.debug("No release tags found for %s", repo)
        else:
            logger.debug("Selected tag %s for %s", tag, repo)
        return tag
