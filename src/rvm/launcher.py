"""The ``resolc`` launcher.

Runs an installed Resolc binary with all arguments forwarded. The first
argument may select a version with ``+VERSION``, otherwise the default
version is used:

    resolc +0.1.0-dev.13 --version
    resolc contract.sol --bin

The launcher never touches the network.
"""

import logging
import os
import subprocess
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

import click

from rvm.cli.debug import configure_logging
from rvm.core.context import RvmContext, create_context
from rvm.core.errors import NotInstalledError, RvmError
from rvm.core.manager import VersionManager
from rvm.core.releases import Binary
from rvm.core.versions import normalize_version

logger = logging.getLogger(__name__)

VERSION_PREFIX = "+"

Executor = Callable[[Path, Sequence[str]], int]


def select_binary(manager: VersionManager, args: Sequence[str]) -> tuple[Binary, list[str]]:
    """Pick the binary to run and the arguments to forward to it.

    Returns:
        The selected binary and the remaining arguments

    Raises:
        InvalidVersionError: If a ``+VERSION`` argument is malformed
        DefaultVersionNotSetError: If no version was given and no default is set
        UnknownVersionError / NotInstalledError: If the version is not installed
    """
    if args and args[0].startswith(VERSION_PREFIX):
        version = normalize_version(args[0][len(VERSION_PREFIX) :])
        return manager.get(version), list(args[1:])
    return manager.get_default(), list(args)


def exec_binary(path: Path, args: Sequence[str]) -> int:
    """Run the binary with inherited stdio and return its exit code.

    On POSIX the current process is replaced and this never returns.
    """
    argv = [str(path), *args]
    if os.name == "posix":
        os.execv(path, argv)
    completed = subprocess.run(argv, check=False)
    # Negative codes mean the child was terminated by a signal
    return completed.returncode if completed.returncode >= 0 else -1


def run(ctx: RvmContext, args: Sequence[str], execute: Executor = exec_binary) -> int:
    """Resolve the binary for args and run it.

    Returns:
        The child's exit code
    """
    manager = ctx.version_manager()
    binary, forwarded = select_binary(manager, args)

    path = binary.local_path()
    if path is None or not path.is_file():
        raise NotInstalledError(binary.version)

    logger.debug("Launching %s with %d argument(s)", path, len(forwarded))
    return execute(path, forwarded)


def main() -> None:
    configure_logging()
    try:
        code = run(create_context(offline=True), sys.argv[1:])
    except (RvmError, ValueError, OSError) as e:
        click.echo(f"rvm: error: {e}", err=True)
        code = 1
    sys.exit(code)
