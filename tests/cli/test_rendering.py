"""Tests for report rendering."""

import json
from unittest.mock import MagicMock, patch

import click
import pytest

from vercheck.cli.rendering import (
    JsonRenderer,
    TableRenderer,
    create_renderer,
    format_check_time,
    format_record_line,
    format_repo_line,
)
from vercheck.core.processor import ProcessedResult
from vercheck.core.repo_list import RepoEntry
from vercheck.core.store.types import VersionRecord

NOW = 1_700_000_000


def _result(repo: str, version: str = "1.0", label: str = "OK (Live)") -> ProcessedResult:
    return ProcessedResult(
        repo=repo,
        version_to_print=version,
        status_label=label,  # type: ignore[arg-type]
        severity="success",
        effective_timestamp=NOW,
    )


def test_format_check_time_shape() -> None:
    rendered = format_check_time(NOW)

    assert len(rendered) == len("2023-11-14 22:13")
    assert rendered[4] == "-" and rendered[10] == " " and rendered[13] == ":"


def test_format_repo_line_columns() -> None:
    line = click.unstyle(format_repo_line(_result("jqlang/jq", "1.7.1")))

    assert line.startswith("jqlang/jq:" + " " * 21 + "1.7.1")
    assert "OK (Live)" in line
    assert line.endswith(format_check_time(NOW))


def test_format_repo_line_colours_by_severity() -> None:
    result = ProcessedResult(
        repo="a/a",
        version_to_print="N/A",
        status_label="FAILED (Again)",
        severity="error",
        effective_timestamp=NOW,
    )

    assert click.style("FAILED (Again)", fg="red")[:5] in format_repo_line(result)


@patch("vercheck.cli.rendering.user_output")
def test_table_renderer_groups_categories(mock_user_output: MagicMock) -> None:
    renderer = TableRenderer()

    renderer.start("(last success: 2h ago)")
    renderer.add_result(RepoEntry("tools", "a/a"), _result("a/a"))
    renderer.add_result(RepoEntry("tools", "b/b"), _result("b/b"))
    renderer.add_result(RepoEntry("vcs", "git/git"), _result("git/git"))
    renderer.finish()

    lines = [click.unstyle(c.args[0]) if c.args else "" for c in mock_user_output.call_args_list]
    assert lines[0] == "☞ Checking upstream versions (last success: 2h ago)..."
    assert lines.count("--- tools ---") == 1
    assert lines.count("--- vcs ---") == 1
    assert lines[-1] == "-" * 64


@patch("vercheck.cli.rendering.user_output")
def test_table_renderer_header_without_summary(mock_user_output: MagicMock) -> None:
    TableRenderer().start("")

    assert mock_user_output.call_args_list[0].args[0] == "☞ Checking upstream versions..."


@patch("vercheck.cli.json_output.machine_output")
def test_json_renderer_emits_single_document(mock_machine_output: MagicMock) -> None:
    renderer = JsonRenderer()

    renderer.start("")
    renderer.add_result(RepoEntry("tools", "jqlang/jq"), _result("jqlang/jq", "1.7.1"))
    renderer.finish()

    mock_machine_output.assert_called_once()
    parsed = json.loads(mock_machine_output.call_args[0][0])
    assert parsed == {
        "last_success": "",
        "results": [
            {
                "category": "tools",
                "repo": "jqlang/jq",
                "version": "1.7.1",
                "status": "OK (Live)",
                "severity": "success",
                "last_checked": format_check_time(NOW),
                "checked_at": NOW,
            }
        ],
    }


@pytest.mark.parametrize(
    ("format", "expected"), [("table", TableRenderer), ("json", JsonRenderer)]
)
def test_create_renderer(format: str, expected: type) -> None:
    assert isinstance(create_renderer(format), expected)


def test_format_record_line_with_valid_stamp() -> None:
    line = format_record_line(VersionRecord("jqlang/jq", "1.7.1", NOW, "OK"))

    assert "1.7.1" in line
    assert line.endswith(format_check_time(NOW))


def test_format_record_line_with_missing_version_and_bad_stamp() -> None:
    line = format_record_line(VersionRecord("a/a", "", "garbage", "FAILED"))

    assert "N/A" in line
    assert "FAILED" in line
    assert line.endswith("never")
