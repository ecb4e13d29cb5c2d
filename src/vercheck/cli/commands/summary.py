"""The `summary` command: report freshness without fetching anything."""

import click

from vercheck.cli.output import error_output, user_output
from vercheck.cli.rendering import format_record_line
from vercheck.core.context import VercheckContext
from vercheck.core.store.types import StoreUnavailableError
from vercheck.core.summary import summarize_last_success


@click.command("summary")
@click.option("--all", "show_all", is_flag=True, help="Also list every stored record.")
@click.pass_obj
def summary_cmd(ctx: VercheckContext, show_all: bool) -> None:
    """Show how long ago the last successful check happened."""
    try:
        summary = summarize_last_success(ctx.store, ctx.time.now())
        records = ctx.store.list_records() if show_all else []
    except StoreUnavailableError as e:
        error_output(str(e))
        raise SystemExit(1) from e

    user_output(summary or "No successful check recorded yet.")
    for record in records:
        user_output(format_record_line(record))
