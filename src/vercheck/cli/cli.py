import logging
import os
from pathlib import Path

import click

from vercheck.cli.commands.check import check_cmd
from vercheck.cli.commands.summary import summary_cmd
from vercheck.cli.output import error_output
from vercheck.core.config import ConfigError, load_config
from vercheck.core.context import VercheckContext, create_context
from vercheck.core.store.types import StoreUnavailableError
from vercheck.version import __version__

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


def configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


def _create_context_or_exit(
    config_path: Path | None, db_file: Path | None, token: str | None
) -> VercheckContext:
    try:
        config = load_config(os.environ, config_path=config_path, db_path=db_file, token=token)
        return create_context(config)
    except (ConfigError, StoreUnavailableError) as e:
        error_output(str(e))
        raise SystemExit(1) from e


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name="vercheck")
@click.option("--debug", is_flag=True, help="Log diagnostics to stderr.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="TOML config file (defaults to ~/.config/vercheck/config.toml).",
)
@click.option(
    "--db-file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Version database (defaults to $VERCHECK_DB or ./versions.db).",
)
@click.option("--token", default=None, help="GitHub token (defaults to $GITHUB_TOKEN).")
@click.pass_context
def cli(
    ctx: click.Context,
    debug: bool,
    config_path: Path | None,
    db_file: Path | None,
    token: str | None,
) -> None:
    """Track the latest released versions of upstream repositories."""
    configure_logging(debug)
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = _create_context_or_exit(config_path, db_file, token)
        ctx.call_on_close(ctx.obj.close)


cli.add_command(check_cmd)
cli.add_command(summary_cmd)


def main() -> None:
    """CLI entry point used by the `vercheck` console script."""
    cli()
