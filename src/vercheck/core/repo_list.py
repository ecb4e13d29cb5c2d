"""Reading the list of repositories to check.

The list is a text file with one ``category, owner/name`` pair per line.
Blank lines and ``#`` comments are ignored.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RepoEntry:
    """One repository to check. ``category`` only groups rows for display."""

    category: str
    repo: str


def parse_repo_line(line: str) -> RepoEntry | None:
    """Parse a single line, returning None for blanks, comments and malformed lines."""
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None
    if "," not in stripped:
        return None
    category, repo = stripped.split(",", 1)
    category = category.strip()
    repo = repo.strip()
    if not category or not repo:
        return None
    return RepoEntry(category=category, repo=repo)


def parse_repo_list(lines: Iterable[str]) -> list[RepoEntry]:
    """Parse every usable line, preserving input order."""
    entries: list[RepoEntry] = []
    for line in lines:
        entry = parse_repo_line(line)
        if entry is not None:
            entries.append(entry)
    return entries


def read_repo_file(path: Path) -> list[RepoEntry]:
    """Read and parse the repository list file.

    Raises:
        FileNotFoundError: If ``path`` does not exist
    """
    return parse_repo_list(path.read_text(encoding="utf-8").splitlines())
