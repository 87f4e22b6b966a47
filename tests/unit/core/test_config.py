"""Tests for configuration loading."""

from pathlib import Path

import pytest

from rvm.core.config import load_config, resolve_root
from rvm.core.constants import DOWNLOAD_TIMEOUT_SECONDS, REPO_URL


def test_rvm_home_wins(tmp_path: Path) -> None:
    (tmp_path / "home" / ".rvm").mkdir(parents=True)

    root = resolve_root({"RVM_HOME": str(tmp_path / "custom")}, tmp_path / "home")

    assert root == tmp_path / "custom"


def test_existing_dot_rvm_is_used(tmp_path: Path) -> None:
    (tmp_path / ".rvm").mkdir()

    assert resolve_root({}, tmp_path) == tmp_path / ".rvm"


def test_falls_back_to_app_dir(tmp_path: Path) -> None:
    root = resolve_root({}, tmp_path)

    assert root != tmp_path / ".rvm"
    assert "rvm" in root.name.lower()


def test_defaults_without_config_file(tmp_path: Path) -> None:
    config = load_config({"RVM_HOME": str(tmp_path)})

    assert config.root == tmp_path
    assert config.repo_url == REPO_URL
    assert config.nightly is False
    assert config.download_timeout == DOWNLOAD_TIMEOUT_SECONDS


def test_config_file_values(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text(
        'repo_url = "https://mirror.example.com/resolc-bin"\nnightly = true\ndownload_timeout = 30\n',
        encoding="utf-8",
    )

    config = load_config({"RVM_HOME": str(tmp_path)})

    assert config.repo_url == "https://mirror.example.com/resolc-bin"
    assert config.nightly is True
    assert config.download_timeout == 30.0


def test_environment_overrides_config_file(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text("nightly = true\n", encoding="utf-8")

    config = load_config(
        {
            "RVM_HOME": str(tmp_path),
            "RVM_REPO_URL": "https://other.example.com",
            "RVM_NIGHTLY": "0",
        }
    )

    assert config.repo_url == "https://other.example.com"
    assert config.nightly is False


def test_malformed_config_file(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text("nightly = [", encoding="utf-8")

    with pytest.raises(ValueError, match="Malformed config file"):
        load_config({"RVM_HOME": str(tmp_path)})


@pytest.mark.parametrize(
    "content",
    ['repo_url = ""', 'nightly = "yes"', "download_timeout = 0", "download_timeout = true"],
)
def test_invalid_config_values(tmp_path: Path, content: str) -> None:
    (tmp_path / "config.toml").write_text(content + "\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid"):
        load_config({"RVM_HOME": str(tmp_path)})
