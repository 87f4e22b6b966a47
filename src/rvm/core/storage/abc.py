"""Abstract interface for the on-disk store of installed Resolc versions."""

from abc import ABC, abstractmethod
from pathlib import Path

from rvm.core.releases import Build


class Storage(ABC):
    """Persistent store of installed binaries and the default-version pointer.

    Layout under root:
        <root>/<version>/<binary name>   installed executable
        <root>/<version>/build.json      Build record of the install
        <root>/.default_version          default version pointer
        <root>/.lock-<key>               transient lock files
    """

    @property
    @abstractmethod
    def root(self) -> Path:
        """Directory holding every installed version."""
        ...

    @abstractmethod
    def install_version(self, build: Build, blob: bytes) -> None:
        """Persist a downloaded binary and its metadata.

        Installing a version that is already completely installed succeeds
        without writing anything.

        Args:
            build: Build being installed
            blob: Verified binary contents

        Raises:
            CorruptInstallError: If a concurrent install left files that
                cannot be verified
            OSError: If writing fails
        """
        ...

    @abstractmethod
    def remove_version(self, version: str) -> None:
        """Delete an installed version, clearing the default if it points at it.

        Does nothing if the version is not installed.
        """
        ...

    @abstractmethod
    def installed_versions(self) -> list[Build]:
        """Build records of every readable install.

        Installs with a missing or unparsable build.json are skipped.
        """
        ...

    @abstractmethod
    def get_default_version(self) -> str:
        """Read the default version pointer.

        Raises:
            FileNotFoundError: If no default is set
            InvalidVersionError: If the pointer does not hold a version
        """
        ...

    @abstractmethod
    def set_default_version(self, version: str) -> None:
        """Point the default at an installed version.

        Raises:
            NotInstalledError: If the version directory does not exist
        """
        ...

    @abstractmethod
    def remove_default(self) -> None:
        """Delete the default version pointer.

        Raises:
            FileNotFoundError: If no default is set
        """
        ...

    def version_dir(self, version: str) -> Path:
        """Directory an install of version lives in."""
        return self.root / version

    def binary_path(self, build: Build) -> Path:
        """Expected location of the executable for build."""
        return self.version_dir(build.version) / build.name
