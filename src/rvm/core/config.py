"""Configuration resolved once at startup.

The rvm root is chosen in this order:
1. $RVM_HOME
2. ~/.rvm, if it already exists
3. the per-user application directory (click.get_app_dir("rvm"))

An optional <root>/config.toml may set:

    repo_url = "https://example.com/resolc-bin"
    nightly = true
    download_timeout = 600

$RVM_REPO_URL and $RVM_NIGHTLY override the file.
"""

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import click

from rvm.core.constants import CONFIG_FILENAME, DOWNLOAD_TIMEOUT_SECONDS, REPO_URL

_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class RvmConfig:
    """Immutable settings for one rvm invocation."""

    root: Path
    repo_url: str
    nightly: bool
    download_timeout: float


def resolve_root(env: Mapping[str, str], home: Path) -> Path:
    """Pick the rvm root directory (see module docstring)."""
    override = env.get("RVM_HOME")
    if override:
        return Path(override).expanduser()

    legacy = home / ".rvm"
    if legacy.exists():
        return legacy
    return Path(click.get_app_dir("rvm"))


def load_config(env: Mapping[str, str] | None = None, home: Path | None = None) -> RvmConfig:
    """Resolve the root directory and read its config file if present.

    Args:
        env: Environment to read overrides from (defaults to os.environ)
        home: Home directory (defaults to Path.home())

    Raises:
        ValueError: If config.toml is malformed or holds values of the wrong type
    """
    environ = os.environ if env is None else env
    root = resolve_root(environ, Path.home() if home is None else home)

    config_path = root / CONFIG_FILENAME
    data = _read_config_file(config_path)

    repo_url = data.get("repo_url", REPO_URL)
    if not isinstance(repo_url, str) or not repo_url:
        raise ValueError(f"Invalid 'repo_url' in {config_path}: expected a non-empty string")

    nightly = data.get("nightly", False)
    if not isinstance(nightly, bool):
        raise ValueError(f"Invalid 'nightly' in {config_path}: expected true or false")

    timeout = data.get("download_timeout", DOWNLOAD_TIMEOUT_SECONDS)
    if isinstance(timeout, bool) or not isinstance(timeout, int | float) or timeout <= 0:
        raise ValueError(
            f"Invalid 'download_timeout' in {config_path}: expected a positive number of seconds"
        )

    if environ.get("RVM_REPO_URL"):
        repo_url = environ["RVM_REPO_URL"]
    if "RVM_NIGHTLY" in environ:
        nightly = environ["RVM_NIGHTLY"].strip().lower() in _TRUTHY

    return RvmConfig(
        root=root,
        repo_url=repo_url,
        nightly=nightly,
        download_timeout=float(timeout),
    )


def _read_config_file(path: Path) -> dict[str, object]:
    if not path.is_file():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Malformed config file {path}: {e}") from e
