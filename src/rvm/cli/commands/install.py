"""Install command implementation."""

import click

from rvm.cli.error_boundary import cli_error_boundary
from rvm.cli.output import spinner, user_output
from rvm.cli.params import parse_version
from rvm.core.context import RvmContext
from rvm.core.errors import CantInstallOfflineError


@click.command("install")
@click.argument("version", callback=parse_version)
@click.option("--set-default", is_flag=True, help="Use as the default Resolc version.")
@click.pass_obj
@cli_error_boundary
def install_cmd(ctx: RvmContext, version: str, set_default: bool) -> None:
    """Install VERSION of Resolc."""
    if ctx.offline:
        raise CantInstallOfflineError()

    manager = ctx.version_manager()
    if manager.is_installed(version):
        user_output(f"Resolc v{version} is already installed")
    else:
        with spinner(f"Downloading and installing Resolc v{version}"):
            manager.get_or_install(version)
        user_output(click.style(f"Resolc v{version} is installed successfully", fg="green"))

    if set_default:
        manager.set_default(version)
        user_output(f"Successfully set Resolc v{version} as default")
