"""Error boundary for CLI commands.

Well-known failures are rendered as a single red ``Error:`` line with exit
code 1 instead of a stack trace.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from rvm.cli.output import user_output
from rvm.core.errors import RvmError

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that catches predictable errors at a command entry point.

    Catches:
        - RvmError: unknown/missing versions, checksum and compatibility
          failures, offline restrictions, fetch failures
        - ValueError: invalid configuration
        - OSError: filesystem failures (permissions, missing root, ...)

    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (RvmError, ValueError, OSError) as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
