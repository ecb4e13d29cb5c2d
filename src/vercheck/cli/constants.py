"""Shared constants for vercheck CLI commands."""

NO_TOKEN_MESSAGE = """GITHUB_TOKEN environment variable is not set.

You must create a GitHub Personal Access Token and export it as an
environment variable.

  > Create a new token at:
    https://github.com/settings/personal-access-tokens/new

  > Required settings:
    - Repository access:  All repositories
    - Permissions:        Contents -> Read-only"""

INVALID_TOKEN_MESSAGE = (
    "GITHUB_TOKEN doesn't look like a valid token "
    "(expected a ghp_, ghs_ or github_pat_ prefix)"
)

NO_REPOS_MESSAGE = "Repository file not found at"

TABLE_SEPARATOR = "-" * 64
