"""Entry point for the rvm command-line interface."""

from dataclasses import replace

import click

from rvm.cli.commands.install import install_cmd
from rvm.cli.commands.list_cmd import list_cmd
from rvm.cli.commands.remove import remove_cmd
from rvm.cli.commands.use import use_cmd
from rvm.cli.commands.which import which_cmd
from rvm.cli.debug import configure_logging
from rvm.cli.error_boundary import cli_error_boundary
from rvm.core.context import RvmContext, create_context
from rvm.version import __version__

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name="rvm")
@click.option("--offline", is_flag=True, help="Work only with installed versions, no network.")
@click.option("--nightly", is_flag=True, help="Include nightly builds in the catalog.")
@click.option("--debug", is_flag=True, help="Enable debug logging (or set RVM_DEBUG=1).")
@click.pass_context
@cli_error_boundary
def cli(ctx: click.Context, offline: bool, nightly: bool, debug: bool) -> None:
    """Manage Resolc installations."""
    configure_logging(debug)

    if ctx.obj is None:
        ctx.obj = create_context(offline=offline, nightly=nightly)
    elif offline or nightly:
        # Tests inject a context; flags still apply on top of it
        existing: RvmContext = ctx.obj
        ctx.obj = replace(
            existing,
            offline=existing.offline or offline,
            nightly=existing.nightly or nightly,
        )


cli.add_command(install_cmd)
cli.add_command(list_cmd)
cli.add_command(remove_cmd)
cli.add_command(use_cmd)
cli.add_command(which_cmd)


def main() -> None:
    cli()
