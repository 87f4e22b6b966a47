"""List command implementation - shows installed and downloadable versions."""

import click

from rvm.cli.error_boundary import cli_error_boundary
from rvm.cli.json_output import BinaryEntry, ListCommandResponse, emit_json
from rvm.cli.output import user_output
from rvm.cli.params import parse_version
from rvm.core.context import RvmContext
from rvm.core.errors import RvmError
from rvm.core.manager import VersionManager


def _default_version(manager: VersionManager) -> str | None:
    # A dangling or unset default is not an error when listing
    try:
        return manager.get_default().version
    except RvmError:
        return None


@click.command("list")
@click.option(
    "--solc",
    "solc_version",
    callback=parse_version,
    default=None,
    help="Hide installed versions that do not support this solc version.",
)
@click.option("--json", "output_json", is_flag=True, help="Output JSON format")
@click.pass_obj
@cli_error_boundary
def list_cmd(ctx: RvmContext, solc_version: str | None, output_json: bool) -> None:
    """List all available and installed versions of Resolc.

    Also prints the default Resolc version if one is set.
    """
    manager = ctx.version_manager()
    binaries = manager.list_available(solc_version)
    default = _default_version(manager)

    if output_json:
        response = ListCommandResponse(
            default=default,
            versions=[BinaryEntry.from_binary(binary) for binary in binaries],
        )
        emit_json(response.model_dump(mode="json"))
        return

    if default is not None:
        user_output(f"Default version of Resolc is: {default}")

    available = [binary.version for binary in binaries if not binary.is_local]
    installed = [binary.version for binary in binaries if binary.is_local]
    user_output(f"Available to install Resolc versions: {', '.join(available) or '(none)'}")
    user_output(f"Already installed Resolc versions: {', '.join(installed) or '(none)'}")
