"""Parameter callbacks shared by rvm commands."""

import click

from rvm.core.errors import InvalidVersionError
from rvm.core.versions import normalize_version


def parse_version(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    """Click callback validating a semantic version argument or option."""
    if value is None:
        return None
    try:
        return normalize_version(value)
    except InvalidVersionError as e:
        raise click.BadParameter(str(e)) from e
