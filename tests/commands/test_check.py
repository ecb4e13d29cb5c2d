"""Tests for the `vercheck check` command."""

import json
import sqlite3
from dataclasses import replace
from pathlib import Path

from click.testing import CliRunner

from tests.test_utils.checker_env import NOW, checker_context, write_repo_file
from vercheck.cli.cli import cli
from vercheck.cli.rendering import format_check_time
from vercheck.core.store.sqlite import SqliteVersionStore
from vercheck.core.store.types import VersionRecord


def test_check_prints_table_with_live_and_failed_rows(tmp_path: Path) -> None:
    write_repo_file(
        tmp_path,
        "# editors and tools",
        "tools, jqlang/jq",
        "tools, neovim/neovim",
        "",
        "vcs, git/git",
    )
    ctx = checker_context(
        tmp_path,
        releases={"jqlang/jq": "jq-1.7.1"},
        tags={"git/git": "v2.47.0"},
    )

    runner = CliRunner()
    result = runner.invoke(cli, ["check"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert result.stdout == ""
    lines = result.stderr.splitlines()
    assert lines[0] == "☞ Checking upstream versions..."
    assert "--- tools ---" in lines
    assert "--- vcs ---" in lines
    jq_line = next(line for line in lines if line.startswith("jqlang/jq:"))
    assert "1.7.1" in jq_line and "OK (Live)" in jq_line
    neovim_line = next(line for line in lines if line.startswith("neovim/neovim:"))
    assert "N/A" in neovim_line and "FAILED (Once)" in neovim_line
    git_line = next(line for line in lines if line.startswith("git/git:"))
    assert "2.47.0" in git_line


def test_check_records_results_in_store(tmp_path: Path) -> None:
    write_repo_file(tmp_path, "tools, jqlang/jq", "tools, neovim/neovim")
    ctx = checker_context(tmp_path, releases={"jqlang/jq": "jq-1.7.1"})

    CliRunner().invoke(cli, ["check"], obj=ctx)

    assert ctx.store.get("jqlang/jq") == VersionRecord("jqlang/jq", "1.7.1", NOW, "OK")
    assert ctx.store.get("neovim/neovim") == VersionRecord("neovim/neovim", "", NOW, "FAILED")


def test_check_uses_cache_and_shows_summary(tmp_path: Path) -> None:
    write_repo_file(tmp_path, "tools, jqlang/jq")
    ctx = checker_context(
        tmp_path,
        records=[VersionRecord("jqlang/jq", "1.7.0", NOW - 7200, "OK")],
    )

    result = CliRunner().invoke(cli, ["check", "--cache-duration", "86400"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "(last success: 2h ago)" in result.stderr
    assert "OK (Cached)" in result.stderr
    assert ctx.registry.default.fetch_calls == []  # type: ignore[attr-defined]


def test_check_json_output(tmp_path: Path) -> None:
    write_repo_file(tmp_path, "tools, jqlang/jq", "vcs, git/git")
    ctx = checker_context(
        tmp_path,
        releases={"jqlang/jq": "v1.7.1"},
        tags={"git/git": None},
    )

    result = CliRunner().invoke(cli, ["check", "--format", "json"], obj=ctx)

    assert result.exit_code == 0, result.output
    parsed = json.loads(result.stdout)
    assert parsed["last_success"] == ""
    assert [row["repo"] for row in parsed["results"]] == ["jqlang/jq", "git/git"]
    jq, git = parsed["results"]
    assert jq["version"] == "1.7.1"
    assert jq["status"] == "OK (Live)"
    assert jq["last_checked"] == format_check_time(NOW)
    assert git["version"] == "N/A"
    assert git["status"] == "FAILED (Once)"
    assert git["severity"] == "warning"


def test_check_missing_token_exits_before_output(tmp_path: Path) -> None:
    write_repo_file(tmp_path, "tools, jqlang/jq")
    ctx = checker_context(tmp_path, releases={"jqlang/jq": "1.0"}, token=None)

    result = CliRunner().invoke(cli, ["check"], obj=ctx)

    assert result.exit_code == 1
    assert "Error: GITHUB_TOKEN environment variable is not set." in result.stderr
    assert "Checking upstream versions" not in result.stderr
    assert ctx.store.put_calls == []  # type: ignore[attr-defined]


def test_check_rejects_malformed_token(tmp_path: Path) -> None:
    write_repo_file(tmp_path, "tools, jqlang/jq")
    ctx = checker_context(tmp_path, token="not-a-token")

    result = CliRunner().invoke(cli, ["check"], obj=ctx)

    assert result.exit_code == 1
    assert "doesn't look like a valid token" in result.stderr


def test_check_tag_listing_repos_do_not_need_token(tmp_path: Path) -> None:
    write_repo_file(tmp_path, "vcs, git/git")
    ctx = checker_context(tmp_path, tags={"git/git": "v2.47.0"}, token=None)

    result = CliRunner().invoke(cli, ["check"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "2.47.0" in result.stderr


def test_check_missing_repo_file(tmp_path: Path) -> None:
    ctx = checker_context(tmp_path)

    result = CliRunner().invoke(cli, ["check"], obj=ctx)

    assert result.exit_code == 1
    assert f"Error: Repository file not found at {tmp_path / 'repos.txt'}" in result.stderr


def test_check_repo_file_option_overrides_config(tmp_path: Path) -> None:
    other = tmp_path / "other.txt"
    other.write_text("tools, jqlang/jq\n", encoding="utf-8")
    ctx = checker_context(tmp_path, releases={"jqlang/jq": "1.7.1"})

    result = CliRunner().invoke(cli, ["check", "--repo-file", str(other)], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "jqlang/jq:" in result.stderr


def test_check_rejects_negative_cache_duration(tmp_path: Path) -> None:
    write_repo_file(tmp_path, "tools, jqlang/jq")

    result = CliRunner().invoke(
        cli, ["check", "--cache-duration=-5"], obj=checker_context(tmp_path)
    )

    assert result.exit_code == 2


def test_check_locked_database_is_fatal_without_partial_report(tmp_path: Path) -> None:
    write_repo_file(tmp_path, "tools, jqlang/jq", "tools, neovim/neovim")
    ctx = checker_context(tmp_path, releases={"jqlang/jq": "1.7.1"})
    db_path = tmp_path / "versions.db"
    ctx = replace(ctx, store=SqliteVersionStore(db_path, ctx.time, busy_timeout=0.05))
    locker = sqlite3.connect(db_path, isolation_level=None)
    locker.execute("BEGIN EXCLUSIVE")
    try:
        result = CliRunner().invoke(cli, ["check"], obj=ctx)
    finally:
        locker.execute("ROLLBACK")
        locker.close()

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "Error: Version database at" in result.stderr
    assert "database is locked" in result.stderr
    assert "Checking upstream versions" not in result.stderr
    assert "jqlang/jq:" not in result.stderr
    assert result.stdout == ""
