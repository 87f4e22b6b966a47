"""Builders for release catalogs used across tests."""

import hashlib

from rvm.core.platform import Platform
from rvm.core.releases import Build, Releases
from rvm.core.storage.abc import Storage
from rvm.core.versions import version_key
from tests.fakes.release_client import FakeReleaseClient

TEST_REPO_URL = "https://releases.example.com/resolc-bin"
LINUX_BINARY_NAME = "resolc-x86_64-unknown-linux-musl"

# Manifest as published for linux (trimmed to one build)
SAMPLE_MANIFEST = {
    "builds": [
        {
            "name": LINUX_BINARY_NAME,
            "version": "0.1.0-dev.13",
            "build": "commit.ad331534",
            "longVersion": "0.1.0-dev.13+commit.ad331534.llvm-18.1.8",
            "url": "https://github.com/paritytech/revive/releases/download/v0.1.0-dev.13/resolc-x86_64-unknown-linux-musl",  # noqa: E501
            "sha256": "07b7e9d3f5b7c9a0b5d0e5d5e0e4c5b2d0e8f2a6b5c3d4e1f0a9b8c7d6e5f4a3",
            "firstSolcVersion": "0.8.0",
            "lastSolcVersion": "0.8.29",
        }
    ],
    "releases": {
        "0.1.0-dev.13": "resolc-x86_64-unknown-linux-musl+0.1.0-dev.13+commit.ad331534.llvm-18.1.8"
    },
    "latestRelease": "0.1.0-dev.13",
}


def binary_blob(version: str) -> bytes:
    """Stand-in executable contents for a version."""
    return f"#!/bin/sh\necho resolc {version}\n".encode()


def make_build(
    version: str = "0.1.0-dev.13",
    *,
    first_solc: str = "0.8.0",
    last_solc: str = "0.8.29",
    checksum: bool = True,
    name: str = LINUX_BINARY_NAME,
) -> Build:
    """Create a Build whose sha256 matches binary_blob(version)."""
    return Build(
        name=name,
        version=version,
        long_version=f"{version}+commit.ad331534.llvm-18.1.8",
        url=f"https://downloads.example.com/v{version}/{name}",
        sha256=hashlib.sha256(binary_blob(version)).hexdigest() if checksum else None,
        first_supported_solc_version=first_solc,
        last_supported_solc_version=last_solc,
    )


def make_releases(*builds: Build) -> Releases:
    """Create a catalog publishing the given builds."""
    latest = max(builds, key=lambda build: version_key(build.version))
    return Releases(
        builds=list(builds),
        releases={build.version: f"{build.name}+{build.long_version}" for build in builds},
        latest_release=latest.version,
    )


def make_client(
    stable: list[Build],
    nightly: list[Build] | None = None,
    platform: Platform = Platform.LINUX,
) -> FakeReleaseClient:
    """Create a FakeReleaseClient serving manifests and blobs for the builds."""
    manifests = {platform.manifest_url(TEST_REPO_URL, "stable"): make_releases(*stable)}
    if nightly is not None:
        manifests[platform.manifest_url(TEST_REPO_URL, "nightly")] = make_releases(*nightly)

    all_builds = [*stable, *(nightly or [])]
    downloads = {build.url: binary_blob(build.version) for build in all_builds}
    return FakeReleaseClient(manifests=manifests, downloads=downloads)


def install_builds(storage: Storage, *builds: Build) -> None:
    """Install builds directly into storage, bypassing the network."""
    for build in builds:
        storage.install_version(build, binary_blob(build.version))
