"""Output routing for CLI commands.

Human-readable messages go to stderr through ``user_output`` so they never
mix with machine-readable data, which goes to stdout through
``machine_output``.
"""

import click


def user_output(message: str = "") -> None:
    """Print a message meant for a person (stderr)."""
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    """Print data meant for another program (stdout)."""
    click.echo(message)


def error_output(message: str) -> None:
    """Print a red "Error: " prefixed message to stderr."""
    user_output(click.style("Error: ", fg="red") + message)
