"""Release catalog models.

The catalog mirrors the ``list.json`` manifests published for each platform:

    {
        "builds": [{"name": ..., "version": ..., "longVersion": ..., "url": ...,
                    "sha256": ..., "firstSolcVersion": ..., "lastSolcVersion": ...}],
        "releases": {"0.1.0-dev.13": "resolc-x86_64-unknown-linux-musl+0.1.0-dev.13+..."},
        "latestRelease": "0.1.0-dev.13"
    }

The same Build record is written next to every installed binary as
``build.json``, which is what lets an offline catalog be rebuilt from disk.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal
from urllib.parse import urlparse

import semver
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from rvm.core.errors import InvalidVersionError, NoVersionsInstalledError, UnknownVersionError
from rvm.core.versions import normalize_version, same_version, version_key


def format_solc_range(first: str, last: str) -> str:
    """Render an inclusive solc range the way it is shown to users."""
    return f">={first}, <={last}"


def _checked_version(value: str) -> str:
    # pydantic only converts ValueError into a ValidationError
    try:
        return normalize_version(value)
    except InvalidVersionError as e:
        raise ValueError(str(e)) from None


class Build(BaseModel):
    """One published, installable Resolc binary."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    version: str
    long_version: str = Field(alias="longVersion")
    url: str
    sha256: str | None = None
    first_supported_solc_version: str = Field(alias="firstSolcVersion")
    last_supported_solc_version: str = Field(alias="lastSolcVersion")

    @field_validator("version", "first_supported_solc_version", "last_supported_solc_version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        """Validate semantic version fields."""
        return _checked_version(v)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate the binary name is a bare filename."""
        if v in ("", ".", "..") or Path(v).name != v or "\\" in v:
            msg = f"binary name must be a plain filename, got {v!r}"
            raise ValueError(msg)
        return v

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate the download URL is absolute http(s)."""
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            msg = f"download url must be an absolute http(s) URL, got {v!r}"
            raise ValueError(msg)
        return v

    @field_validator("sha256")
    @classmethod
    def normalize_sha256(cls, v: str | None) -> str | None:
        """Lower-case the published digest so comparisons are case-insensitive."""
        if v is None:
            return None
        return v.strip().lower()

    @model_validator(mode="after")
    def validate_solc_range(self) -> "Build":
        """Ensure the supported solc range is not inverted."""
        if version_key(self.first_supported_solc_version) > version_key(
            self.last_supported_solc_version
        ):
            msg = (
                f"firstSolcVersion {self.first_supported_solc_version} is newer than "
                f"lastSolcVersion {self.last_supported_solc_version}"
            )
            raise ValueError(msg)
        return self

    @property
    def solc_range(self) -> str:
        """Supported solc versions as a requirement string."""
        return format_solc_range(
            self.first_supported_solc_version, self.last_supported_solc_version
        )

    def info(self) -> "BinaryInfo":
        """Summary of this build for listing purposes."""
        return BinaryInfo(
            version=self.version,
            first_supported_solc_version=self.first_supported_solc_version,
            last_supported_solc_version=self.last_supported_solc_version,
        )

    def into_local(self, root: Path) -> "Binary":
        """Describe this build as installed under root."""
        return Binary.local(root / self.version / self.name, self.info())

    def into_remote(self) -> "Binary":
        """Describe this build as available for download."""
        return Binary.remote(self.info())


class Releases(BaseModel):
    """Point-in-time view of the published builds for one platform."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    builds: list[Build]
    releases: dict[str, str]
    latest_release: str = Field(alias="latestRelease")

    @field_validator("releases")
    @classmethod
    def validate_release_keys(cls, v: dict[str, str]) -> dict[str, str]:
        """Validate every release key is a semantic version."""
        return {_checked_version(key): value for key, value in v.items()}

    @field_validator("latest_release")
    @classmethod
    def validate_latest_release(cls, v: str) -> str:
        """Validate the latest release marker."""
        return _checked_version(v)

    def get_build(self, version: str) -> Build:
        """Look up the build published for a Resolc version.

        The version must appear both in the release map and among the builds;
        a release entry without a build is treated as unknown.

        Raises:
            UnknownVersionError: If the catalog has no such build
        """
        if not any(same_version(key, version) for key in self.releases):
            raise UnknownVersionError(version)
        for build in self.builds:
            if same_version(build.version, version):
                return build
        raise UnknownVersionError(version)

    def merge(self, other: "Releases") -> "Releases":
        """Combine this catalog with another one (e.g. the nightly channel).

        Builds are concatenated and de-duplicated by long version, keeping the
        first occurrence. Release maps are unioned with entries from other
        taking precedence. The latest release is always this catalog's.
        """
        seen: set[str] = set()
        builds: list[Build] = []
        for build in [*self.builds, *other.builds]:
            if build.long_version in seen:
                continue
            seen.add(build.long_version)
            builds.append(build)

        return Releases(
            builds=builds,
            releases={**self.releases, **other.releases},
            latest_release=self.latest_release,
        )

    @staticmethod
    def from_installed(installed: list[Build]) -> "Releases":
        """Synthesize a catalog from locally installed builds (offline mode).

        Raises:
            NoVersionsInstalledError: If nothing is installed
        """
        if not installed:
            raise NoVersionsInstalledError()

        latest = max(installed, key=lambda build: version_key(build.version))
        return Releases(
            builds=list(installed),
            releases={build.version: f"{build.name}+{build.long_version}" for build in installed},
            latest_release=latest.version,
        )


@dataclass(frozen=True)
class BinaryInfo:
    """Basic information about a Resolc binary."""

    version: str
    first_supported_solc_version: str
    last_supported_solc_version: str

    @property
    def solc_range(self) -> str:
        """Supported solc versions as a requirement string."""
        return format_solc_range(
            self.first_supported_solc_version, self.last_supported_solc_version
        )


BinaryKind = Literal["local", "remote"]


@dataclass(frozen=True)
class Binary:
    """A Resolc binary that is either installed locally or available remotely.

    Tagged by ``kind``: local binaries carry the path of the executable on
    disk, remote binaries carry no path.
    """

    kind: BinaryKind
    info: BinaryInfo
    path: Path | None = None

    def __post_init__(self) -> None:
        if self.kind == "local" and self.path is None:
            raise ValueError("local binaries require a path")
        if self.kind == "remote" and self.path is not None:
            raise ValueError("remote binaries have no path")

    @staticmethod
    def local(path: Path, info: BinaryInfo) -> "Binary":
        """Create a binary that is installed at path."""
        return Binary(kind="local", info=info, path=path)

    @staticmethod
    def remote(info: BinaryInfo) -> "Binary":
        """Create a binary that can be downloaded."""
        return Binary(kind="remote", info=info)

    @property
    def version(self) -> str:
        """Resolc version of this binary."""
        return self.info.version

    @property
    def is_local(self) -> bool:
        """Whether the binary is installed on disk."""
        return self.kind == "local"

    def local_path(self) -> Path | None:
        """Path to the executable, or None for remote binaries."""
        return self.path

    def sort_key(self) -> semver.Version:
        """Key ordering binaries by version."""
        return version_key(self.info.version)


def sort_binaries(binaries: list[Binary]) -> list[Binary]:
    """Return binaries ordered by version (stable for equal versions)."""
    return sorted(binaries, key=Binary.sort_key)
