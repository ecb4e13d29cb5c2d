"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting preconditions in CLI
commands with consistent, user-friendly error messages. All errors use a red
"Error:" prefix and exit with status 1 before any report output is printed.
"""

from pathlib import Path
from typing import TypeVar

from vercheck.cli.constants import INVALID_TOKEN_MESSAGE, NO_REPOS_MESSAGE, NO_TOKEN_MESSAGE
from vercheck.cli.output import error_output
from vercheck.core.config import token_looks_valid

T = TypeVar("T")


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Args:
            condition: Boolean condition to check
            error_message: Error message to display if condition is false.
                          "Error: " prefix will be added automatically in red.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            error_output(error_message)
            raise SystemExit(1)

    @staticmethod
    def not_none(value: T | None, error_message: str) -> T:
        """Ensure value is not None, otherwise output styled error and exit.

        Provides type narrowing: takes `T | None` and returns `T`.

        Raises:
            SystemExit: If value is None (with exit code 1)
        """
        if value is None:
            error_output(error_message)
            raise SystemExit(1)
        return value

    @staticmethod
    def file_exists(path: Path, error_message: str | None = None) -> None:
        """Ensure a regular file exists at path, otherwise output styled error and exit.

        Args:
            path: File that must exist
            error_message: Optional custom message. Defaults to the
                          repository-file message followed by the path.

        Raises:
            SystemExit: If path is not an existing file
        """
        if not path.is_file():
            if error_message is None:
                error_message = f"{NO_REPOS_MESSAGE} {path}"
            error_output(error_message)
            raise SystemExit(1)

    @staticmethod
    def github_token(token: str | None) -> str:
        """Ensure a plausible GitHub token is configured.

        Args:
            token: Token from config (GITHUB_TOKEN or --token)

        Returns:
            The token unchanged

        Raises:
            SystemExit: If the token is missing or has an unexpected prefix
        """
        token = Ensure.not_none(token, NO_TOKEN_MESSAGE)
        Ensure.invariant(token_looks_valid(token), INVALID_TOKEN_MESSAGE)
        return token
