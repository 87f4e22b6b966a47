"""Output routing for CLI commands.

Human-readable messages go to stderr so stdout stays clean for data that
scripts consume (paths, JSON).
"""

import click
from rich.console import Console
from rich.status import Status


def user_output(message: str = "") -> None:
    """Print a message meant for the person at the terminal (stderr)."""
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    """Print data meant for programs and pipes (stdout)."""
    click.echo(message)


def spinner(message: str) -> Status:
    """Status spinner shown on stderr while a long operation runs.

    Usage:
        with spinner("Downloading..."):
            do_work()
    """
    return Console(stderr=True).status(message)
