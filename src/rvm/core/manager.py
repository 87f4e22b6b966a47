"""Version manager: resolves, installs and selects Resolc binaries."""

import hashlib
import logging

from rvm.core.compat import check_solc_compat, is_solc_compatible
from rvm.core.errors import (
    CantInstallOfflineError,
    ChecksumValidationError,
    DefaultVersionNotSetError,
    NotInstalledError,
)
from rvm.core.http.abc import ReleaseClient
from rvm.core.platform import Platform
from rvm.core.releases import Binary, Build, Releases, sort_binaries
from rvm.core.storage.abc import Storage
from rvm.core.versions import same_version, version_key

logger = logging.getLogger(__name__)


def verify_checksum(build: Build, blob: bytes) -> None:
    """Check a downloaded blob against the build's published sha256.

    Builds published without a checksum are trusted as fetched.

    Raises:
        ChecksumValidationError: If the digests differ
    """
    if build.sha256 is None:
        logger.debug("No checksum published for Resolc v%s, skipping", build.version)
        return
    actual = hashlib.sha256(blob).hexdigest()
    if actual != build.sha256:
        raise ChecksumValidationError(expected=build.sha256, actual=actual)


def load_releases(
    storage: Storage,
    client: ReleaseClient,
    *,
    offline: bool,
    repo_url: str,
    nightly: bool,
    platform: Platform | None = None,
) -> Releases:
    """Build the release catalog for a manager session.

    Offline, the catalog is synthesized from what is installed. Online, the
    stable manifest for the platform is fetched, and with nightly enabled the
    nightly manifest is merged into it.

    Raises:
        NoVersionsInstalledError: Offline with nothing installed
        PlatformNotSupportedError: Online on a platform without builds
        FetchError: If a manifest cannot be fetched
    """
    if offline:
        return Releases.from_installed(storage.installed_versions())

    target = platform if platform is not None else Platform.detect()
    releases = client.fetch_releases(target.manifest_url(repo_url, "stable"))
    if nightly:
        releases = releases.merge(client.fetch_releases(target.manifest_url(repo_url, "nightly")))
    return releases


class VersionManager:
    """Handles Resolc installation and selection for one session.

    The catalog is loaded once at construction and never refreshed; the
    default pointer and install state are always re-read from storage.
    """

    def __init__(
        self,
        *,
        storage: Storage,
        client: ReleaseClient,
        releases: Releases,
        offline: bool,
    ) -> None:
        self._storage = storage
        self._client = client
        self._releases = releases
        self._offline = offline

    @staticmethod
    def create(
        storage: Storage,
        client: ReleaseClient,
        *,
        offline: bool,
        repo_url: str,
        nightly: bool = False,
        platform: Platform | None = None,
    ) -> "VersionManager":
        """Load the catalog (see load_releases) and create a manager."""
        releases = load_releases(
            storage,
            client,
            offline=offline,
            repo_url=repo_url,
            nightly=nightly,
            platform=platform,
        )
        return VersionManager(storage=storage, client=client, releases=releases, offline=offline)

    @property
    def offline(self) -> bool:
        return self._offline

    @property
    def releases(self) -> Releases:
        return self._releases

    def get(self, version: str, solc_version: str | None = None) -> Binary:
        """Return an already installed Resolc binary.

        Args:
            version: Requested Resolc version
            solc_version: Optional solc version the binary must support

        Raises:
            UnknownVersionError: If the version is not in the catalog
            IncompatibleSolcVersionError: If solc_version is not supported
            NotInstalledError: If the version is not installed
        """
        build = self._releases.get_build(version)
        if solc_version is not None:
            check_solc_compat(build, solc_version)

        if not self._storage.binary_path(build).exists():
            raise NotInstalledError(build.version)
        return build.into_local(self._storage.root)

    def get_or_install(self, version: str, solc_version: str | None = None) -> Binary:
        """Return an installed binary, downloading and installing it if needed.

        The blob is verified before anything is written, so a checksum
        mismatch leaves nothing on disk.

        Raises:
            CantInstallOfflineError: If the version is missing in offline mode
            ChecksumValidationError: If the download does not match its sha256
            FetchError: If the download fails
        """
        try:
            return self.get(version, solc_version)
        except NotInstalledError:
            if self._offline:
                raise CantInstallOfflineError() from None

        build = self._releases.get_build(version)
        logger.debug("Downloading Resolc v%s from %s", build.version, build.url)
        blob = self._client.download(build.url)
        verify_checksum(build, blob)
        self._storage.install_version(build, blob)
        return build.into_local(self._storage.root)

    def is_installed(self, version: str) -> bool:
        """Check whether a catalog version is installed."""
        try:
            self.get(version)
        except NotInstalledError:
            return False
        return True

    def remove(self, version: str) -> None:
        """Uninstall a version, clearing the default if it pointed at it.

        Raises:
            NotInstalledError: If the version is not installed
        """
        installed = self._installed_version(version)
        if installed is None:
            raise NotInstalledError(version)
        self._storage.remove_version(installed)

    def get_default(self) -> Binary:
        """Return the binary selected as default.

        Raises:
            DefaultVersionNotSetError: If no default is set
            NotInstalledError: If the default points at a missing install
        """
        try:
            version = self._storage.get_default_version()
        except FileNotFoundError:
            raise DefaultVersionNotSetError() from None
        return self.get(version)

    def set_default(self, version: str) -> None:
        """Select an installed version as default.

        Raises:
            NotInstalledError: If the version is not installed
        """
        binary = self.get(version)
        self._storage.set_default_version(binary.version)

    def list_available(self, solc_version: str | None = None) -> list[Binary]:
        """List installed and downloadable binaries, sorted by version.

        Args:
            solc_version: If given, installed binaries that do not support it
                are left out

        Returns:
            One entry per version: local when installed, remote otherwise
        """
        installed_builds = self._storage.installed_versions()
        installed_keys = {version_key(build.version) for build in installed_builds}

        installed = [
            build.into_local(self._storage.root)
            for build in installed_builds
            if solc_version is None or is_solc_compatible(build, solc_version)
        ]
        available: list[Binary] = []
        listed_keys = set(installed_keys)
        for build in self._releases.builds:
            key = version_key(build.version)
            if key in listed_keys:
                continue
            listed_keys.add(key)
            available.append(build.into_remote())
        return sort_binaries(installed + available)

    def _installed_version(self, version: str) -> str | None:
        # Directory names are the published spelling; match by precedence
        for build in self._storage.installed_versions():
            if same_version(build.version, version):
                return build.version
        if self._storage.version_dir(version).exists():
            return version
        return None
