"""The `check` command: resolve and report every listed repository."""

import logging
from dataclasses import replace
from pathlib import Path

import click

from vercheck.cli.ensure import Ensure
from vercheck.cli.json_output import json_error_boundary
from vercheck.cli.output import error_output
from vercheck.cli.rendering import create_renderer
from vercheck.core.context import VercheckContext
from vercheck.core.repo_list import read_repo_file
from vercheck.core.store.types import StoreUnavailableError
from vercheck.core.summary import summarize_last_success

logger = logging.getLogger(__name__)


def _apply_overrides(
    ctx: VercheckContext, repo_file: Path | None, cache_duration: int | None
) -> VercheckContext:
    config = ctx.config
    if repo_file is not None:
        config = replace(config, repo_file=repo_file)
    if cache_duration is not None:
        config = replace(config, cache_duration=cache_duration)
    return ctx.with_config(config)


@click.command("check")
@click.option(
    "--format",
    "format",
    type=click.Choice(["table", "json"]),
    default="table",
    show_default=True,
    help="Output format.",
)
@click.option(
    "--repo-file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Repository list (defaults to $REPO_FILE or ./repos.txt).",
)
@click.option(
    "--cache-duration",
    type=click.IntRange(min=0),
    default=None,
    help="Seconds a stored version stays fresh (defaults to $CACHE_DURATION or 3600).",
)
@click.pass_obj
@json_error_boundary
def check_cmd(
    ctx: VercheckContext, format: str, repo_file: Path | None, cache_duration: int | None
) -> None:
    """Check the latest upstream version of every listed repository."""
    ctx = _apply_overrides(ctx, repo_file, cache_duration)
    config = ctx.config

    Ensure.file_exists(config.repo_file)
    entries = read_repo_file(config.repo_file)

    # Only the releases API needs a credential
    if ctx.registry.any_uses_default(entry.repo for entry in entries):
        token = Ensure.github_token(config.github_token)
        logger.debug("Using GitHub token: %s...", token[:8])

    # Nothing is rendered until every repo has been processed
    now = ctx.time.now()
    try:
        summary = summarize_last_success(ctx.store, now)
        results = list(ctx.processor.process_all(entries, now))
    except StoreUnavailableError as e:
        error_output(str(e))
        raise SystemExit(1) from e

    renderer = create_renderer(format)
    renderer.start(summary)
    for entry, result in results:
        renderer.add_result(entry, result)
    renderer.finish()
