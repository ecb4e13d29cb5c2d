"""Configuration loading.

Provides an immutable CheckerConfig built once at the CLI entry point from, in
increasing precedence: built-in defaults, an optional TOML config file,
environment variables, and command-line options.
"""

import re
import tomllib
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from vercheck.core.cache_policy import DEFAULT_CACHE_DURATION
from vercheck.core.fetch.registry import DEFAULT_TAG_LISTING_REPOS
from vercheck.core.fetch.releases import DEFAULT_HTTP_TIMEOUT
from vercheck.core.fetch.tags import DEFAULT_GIT_TIMEOUT

DEFAULT_DB_FILE = Path("versions.db")
DEFAULT_REPO_FILE = Path("repos.txt")

# Classic (ghp_), server-to-server (ghs_) and fine-grained (github_pat_) tokens
TOKEN_PATTERN = re.compile(r"^(gh[ps]_|github_pat_)")


class ConfigError(Exception):
    """Raised when configuration values are missing or malformed."""


@dataclass(frozen=True)
class CheckerConfig:
    """Immutable checker configuration.

    Loaded once at CLI entry point and stored in VercheckContext.
    All fields are read-only after construction.
    """

    cache_duration: int
    db_path: Path
    repo_file: Path
    github_token: str | None
    tag_listing_repos: tuple[str, ...]
    http_timeout: float
    git_timeout: float

    @staticmethod
    def defaults() -> "CheckerConfig":
        return CheckerConfig(
            cache_duration=DEFAULT_CACHE_DURATION,
            db_path=DEFAULT_DB_FILE,
            repo_file=DEFAULT_REPO_FILE,
            github_token=None,
            tag_listing_repos=DEFAULT_TAG_LISTING_REPOS,
            http_timeout=DEFAULT_HTTP_TIMEOUT,
            git_timeout=DEFAULT_GIT_TIMEOUT,
        )


def token_looks_valid(token: str) -> bool:
    return TOKEN_PATTERN.match(token) is not None


def default_config_path(env: Mapping[str, str]) -> Path:
    """~/.config/vercheck/config.toml, honouring XDG_CONFIG_HOME."""
    config_home = env.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / "vercheck" / "config.toml"


def parse_cache_duration(value: object, source: str) -> int:
    """Validate a cache duration coming from ``source``.

    Raises:
        ConfigError: If the value is not a non-negative integer
    """
    if isinstance(value, bool):
        raise ConfigError(f"{source}: cache duration must be an integer, got {value!r}")
    if isinstance(value, int):
        duration = value
    elif isinstance(value, str) and value.strip().isdigit():
        duration = int(value.strip())
    else:
        raise ConfigError(f"{source}: cache duration must be an integer, got {value!r}")
    if duration < 0:
        raise ConfigError(f"{source}: cache duration must not be negative")
    return duration


def _parse_timeout(value: object, source: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ConfigError(f"{source}: timeout must be a positive number, got {value!r}")
    return float(value)


def _read_config_file(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Malformed config file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e


def _merge_repos(*groups: Iterable[str]) -> tuple[str, ...]:
    merged: list[str] = []
    for group in groups:
        for repo in group:
            repo = repo.strip()
            if repo and repo not in merged:
                merged.append(repo)
    return tuple(merged)


def load_config(
    env: Mapping[str, str],
    *,
    config_path: Path | None = None,
    cache_duration: int | None = None,
    db_path: Path | None = None,
    repo_file: Path | None = None,
    token: str | None = None,
) -> CheckerConfig:
    """Build the checker configuration.

    Args:
        env: Environment variables (usually os.environ)
        config_path: Explicit TOML config file; must exist when given
        cache_duration: --cache-duration override
        db_path: --db-file override
        repo_file: --repo-file override
        token: --token override

    Returns:
        CheckerConfig with all sources merged

    Raises:
        ConfigError: If any source holds a malformed value
    """
    defaults = CheckerConfig.defaults()

    explicit_path = config_path
    if explicit_path is None and env.get("VERCHECK_CONFIG"):
        explicit_path = Path(env["VERCHECK_CONFIG"])
    if explicit_path is not None:
        if not explicit_path.exists():
            raise ConfigError(f"Config file not found: {explicit_path}")
        data = _read_config_file(explicit_path)
        file_label = str(explicit_path)
    else:
        fallback = default_config_path(env)
        data = _read_config_file(fallback) if fallback.exists() else {}
        file_label = str(fallback)

    resolved_duration = defaults.cache_duration
    if "cache_duration" in data:
        resolved_duration = parse_cache_duration(data["cache_duration"], file_label)
    if env.get("CACHE_DURATION"):
        resolved_duration = parse_cache_duration(env["CACHE_DURATION"], "CACHE_DURATION")
    if cache_duration is not None:
        resolved_duration = parse_cache_duration(cache_duration, "--cache-duration")

    resolved_db = Path(data["db_file"]).expanduser() if "db_file" in data else defaults.db_path
    if env.get("VERCHECK_DB"):
        resolved_db = Path(env["VERCHECK_DB"]).expanduser()
    if db_path is not None:
        resolved_db = db_path

    resolved_repo_file = (
        Path(data["repo_file"]).expanduser() if "repo_file" in data else defaults.repo_file
    )
    if env.get("REPO_FILE"):
        resolved_repo_file = Path(env["REPO_FILE"]).expanduser()
    if repo_file is not None:
        resolved_repo_file = repo_file

    file_repos = data.get("tag_listing_repos", [])
    if not isinstance(file_repos, list) or not all(isinstance(r, str) for r in file_repos):
        raise ConfigError(f"{file_label}: tag_listing_repos must be a list of strings")
    env_repos = env.get("VERCHECK_TAG_REPOS", "").split(",")

    http_timeout = defaults.http_timeout
    if "http_timeout" in data:
        http_timeout = _parse_timeout(data["http_timeout"], file_label)
    git_timeout = defaults.git_timeout
    if "git_timeout" in data:
        git_timeout = _parse_timeout(data["git_timeout"], file_label)

    return CheckerConfig(
        cache_duration=resolved_duration,
        db_path=resolved_db,
        repo_file=resolved_repo_file,
        github_token=token or env.get("GITHUB_TOKEN") or None,
        tag_listing_repos=_merge_repos(defaults.tag_listing_repos, file_repos, env_repos),
        http_timeout=http_timeout,
        git_timeout=git_timeout,
    )
