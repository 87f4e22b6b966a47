"""Remove command implementation."""

import click

from rvm.cli.error_boundary import cli_error_boundary
from rvm.cli.output import user_output
from rvm.cli.params import parse_version
from rvm.core.context import RvmContext


@click.command("remove")
@click.argument("version", callback=parse_version)
@click.pass_obj
@cli_error_boundary
def remove_cmd(ctx: RvmContext, version: str) -> None:
    """Uninstall VERSION of Resolc."""
    ctx.version_manager().remove(version)
    user_output(f"Resolc v{version} is removed successfully")
