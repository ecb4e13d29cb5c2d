"""Tests for subprocess wrapper with rich error context."""

import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from vercheck.core.subprocess import run_subprocess_with_context


def test_success_case_returns_completed_process() -> None:
    """Test that successful subprocess execution returns CompletedProcess."""
    with patch("vercheck.core.subprocess.subprocess.run") as mock_run:
        mock_result = Mock(spec=subprocess.CompletedProcess)
        mock_result.returncode = 0
        mock_result.stdout = "abc\trefs/tags/v1.0\n"
        mock_run.return_value = mock_result

        result = run_subprocess_with_context(
            ["git", "ls-remote", "--tags", "https://github.com/git/git"],
            operation_context="list tags of git/git",
            cwd=Path("/repo"),
            timeout=60.0,
        )

        assert result == mock_result
        mock_run.assert_called_once_with(
            ["git", "ls-remote", "--tags", "https://github.com/git/git"],
            cwd=Path("/repo"),
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=True,
            timeout=60.0,
            env=None,
        )


def test_env_mapping_is_passed_as_dict() -> None:
    with patch("vercheck.core.subprocess.subprocess.run") as mock_run:
        mock_run.return_value = Mock(spec=subprocess.CompletedProcess)

        run_subprocess_with_context(
            ["git", "version"], operation_context="read git version", env={"A": "1"}
        )

        assert mock_run.call_args.kwargs["env"] == {"A": "1"}


def test_failure_with_stderr_includes_stderr_in_error() -> None:
    """Test that subprocess failure with stderr includes stderr in error message."""
    with patch("vercheck.core.subprocess.subprocess.run") as mock_run:
        error = subprocess.CalledProcessError(
            returncode=128,
            cmd=["git", "ls-remote", "--tags", "https://github.com/nope/nope"],
            stderr="fatal: repository 'https://github.com/nope/nope/' not found",
        )
        mock_run.side_effect = error

        with pytest.raises(RuntimeError) as exc_info:
            run_subprocess_with_context(
                ["git", "ls-remote", "--tags", "https://github.com/nope/nope"],
                operation_context="list tags of nope/nope",
            )

        error_message = str(exc_info.value)
        assert "Failed to list tags of nope/nope" in error_message
        assert "Command: git ls-remote --tags https://github.com/nope/nope" in error_message
        assert "Exit code: 128" in error_message
        assert "stderr: fatal: repository" in error_message
        assert exc_info.value.__cause__ is error


def test_failure_with_blank_stderr_omits_stderr_line() -> None:
    with patch("vercheck.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = subprocess.CalledProcessError(
            returncode=1, cmd=["command"], stderr="   \n  "
        )

        with pytest.raises(RuntimeError) as exc_info:
            run_subprocess_with_context(["command"], operation_context="run command")

        assert "stderr:" not in str(exc_info.value)


def test_timeout_is_reported() -> None:
    with patch("vercheck.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = subprocess.TimeoutExpired(cmd=["git"], timeout=60.0)

        with pytest.raises(RuntimeError, match="Timed out after 60.0s"):
            run_subprocess_with_context(
                ["git", "ls-remote"], operation_context="list tags", timeout=60.0
            )


def test_missing_binary_is_reported() -> None:
    with patch("vercheck.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = FileNotFoundError("git")

        with pytest.raises(RuntimeError, match="Command not found while trying to list tags: git"):
            run_subprocess_with_context(["git", "ls-remote"], operation_context="list tags")


def test_check_false_behavior_no_exception() -> None:
    """Test that check=False prevents exception on non-zero exit."""
    with patch("vercheck.core.subprocess.subprocess.run") as mock_run:
        mock_result = Mock(spec=subprocess.CompletedProcess)
        mock_result.returncode = 1
        mock_run.return_value = mock_result

        result = run_subprocess_with_context(
            ["command"], operation_context="run command", check=False
        )

        assert result.returncode == 1
        assert mock_run.call_args.kwargs["check"] is False


def test_undecodable_output_is_replaced_not_raised() -> None:
    with patch("vercheck.core.subprocess.subprocess.run") as mock_run:
        mock_run.return_value = Mock(spec=subprocess.CompletedProcess)

        run_subprocess_with_context(["git", "ls-remote"], operation_context="list tags")

        assert mock_run.call_args.kwargs["encoding"] == "utf-8"
        assert mock_run.call_args.kwargs["errors"] == "replace"
