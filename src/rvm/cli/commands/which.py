"""Which command implementation - prints the path of an installed binary."""

import click

from rvm.cli.error_boundary import cli_error_boundary
from rvm.cli.output import machine_output
from rvm.cli.params import parse_version
from rvm.core.context import RvmContext


@click.command("which")
@click.argument("version", callback=parse_version)
@click.pass_obj
@cli_error_boundary
def which_cmd(ctx: RvmContext, version: str) -> None:
    """Print the path to the installed VERSION of Resolc."""
    binary = ctx.version_manager().get(version)
    machine_output(str(binary.local_path()))
