"""Use command implementation - selects the default Resolc version."""

import click

from rvm.cli.error_boundary import cli_error_boundary
from rvm.cli.output import spinner, user_output
from rvm.cli.params import parse_version
from rvm.core.context import RvmContext


@click.command("use")
@click.argument("version", callback=parse_version)
@click.option("--install", is_flag=True, help="Install the version first if it is missing.")
@click.pass_obj
@cli_error_boundary
def use_cmd(ctx: RvmContext, version: str, install: bool) -> None:
    """Set VERSION as the default Resolc version."""
    manager = ctx.version_manager()

    if install and not ctx.offline and not manager.is_installed(version):
        with spinner(f"Downloading and installing Resolc v{version}"):
            manager.get_or_install(version)
        user_output(click.style(f"Resolc v{version} is installed successfully", fg="green"))

    manager.set_default(version)
    user_output(f"Successfully set Resolc v{version} as default")
