"""Tests for platform detection and manifest URLs."""

import pytest

from rvm.core.errors import PlatformNotSupportedError
from rvm.core.platform import Platform


@pytest.mark.parametrize(
    ("system", "machine", "expected"),
    [
        ("Linux", "x86_64", Platform.LINUX),
        ("Darwin", "arm64", Platform.MACOS),
        ("Darwin", "x86_64", Platform.MACOS),
        ("Windows", "AMD64", Platform.WINDOWS),
    ],
)
def test_detect_supported_platforms(system: str, machine: str, expected: Platform) -> None:
    assert Platform.detect(system, machine) is expected


def test_detect_unsupported_platform() -> None:
    with pytest.raises(PlatformNotSupportedError) as exc_info:
        Platform.detect("Linux", "aarch64")

    assert str(exc_info.value) == "Unsupported platform linux_aarch64"


def test_manifest_urls() -> None:
    repo = "https://raw.githubusercontent.com/paritytech/resolc-bin/refs/heads/main/"

    assert Platform.LINUX.manifest_url(repo) == (
        "https://raw.githubusercontent.com/paritytech/resolc-bin/refs/heads/main/linux/list.json"
    )
    assert Platform.MACOS.manifest_url(repo, "nightly") == (
        "https://raw.githubusercontent.com/paritytech/resolc-bin/refs/heads/main/nightly/macos/list.json"  # noqa: E501
    )
