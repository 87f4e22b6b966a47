"""Filesystem-backed storage under the rvm root directory."""

import hashlib
import logging
import os
import shutil
import tempfile
from pathlib import Path

from pydantic import ValidationError

from rvm.core.constants import (
    BUILD_METADATA_FILENAME,
    DEFAULT_VERSION_FILENAME,
    GLOBAL_LOCK_KEY,
    INSTALL_RACE_BACKOFF_SECONDS,
)
from rvm.core.errors import CorruptInstallError, InvalidVersionError, NotInstalledError
from rvm.core.releases import Build
from rvm.core.storage.abc import Storage
from rvm.core.storage.lock import lock_file
from rvm.core.time.abc import Time
from rvm.core.versions import normalize_version, same_version

logger = logging.getLogger(__name__)


class DataDirStorage(Storage):
    """Production storage rooted at a single data directory.

    Mutations of one version are serialized across processes by that
    version's lock; the default pointer is serialized by the global lock.
    """

    def __init__(self, root: Path, time: Time) -> None:
        """Create storage over an existing root directory.

        Args:
            root: rvm root directory
            time: Clock used for the lost-install-race backoff
        """
        self._root = root
        self._time = time

    @staticmethod
    def create(root: Path, time: Time) -> "DataDirStorage":
        """Create storage, making the root directory if it does not exist.

        Raises:
            NotADirectoryError: If root exists but is not a directory
        """
        root.mkdir(parents=True, exist_ok=True)
        if not root.is_dir():
            raise NotADirectoryError(f"{root} is not a directory")
        return DataDirStorage(root, time)

    @property
    def root(self) -> Path:
        return self._root

    def install_version(self, build: Build, blob: bytes) -> None:
        folder = self.version_dir(build.version)

        with lock_file(self._root, build.version):
            if self._is_complete(build, check_digest=False):
                logger.debug("Resolc v%s already installed in %s", build.version, folder)
                return

            # Holding the lock means nobody else is writing here: anything
            # left over is from an interrupted install.
            if folder.exists():
                logger.debug("Clearing incomplete install in %s", folder)
                shutil.rmtree(folder)

            folder.mkdir(parents=True, exist_ok=True)
            try:
                self._write_install(build, blob, folder)
            except FileExistsError:
                logger.debug("Lost install race for Resolc v%s, re-verifying", build.version)
                self._time.sleep(INSTALL_RACE_BACKOFF_SECONDS)
                if not self._is_complete(build, check_digest=True):
                    raise CorruptInstallError(build.version, str(folder)) from None

        logger.debug("Installed Resolc v%s into %s", build.version, folder)

    def remove_version(self, version: str) -> None:
        folder = self.version_dir(version)
        if not folder.exists():
            return

        with lock_file(self._root, version):
            with lock_file(self._root, GLOBAL_LOCK_KEY):
                if not folder.exists():
                    # Removed by another process while we waited
                    return
                if self._default_points_at(version):
                    self._default_path().unlink(missing_ok=True)
                shutil.rmtree(folder)

        logger.debug("Removed Resolc v%s from %s", version, folder)

    def installed_versions(self) -> list[Build]:
        builds: list[Build] = []
        for entry in sorted(self._root.iterdir()):
            if not entry.is_dir():
                continue
            sidecar = entry / BUILD_METADATA_FILENAME
            try:
                builds.append(Build.model_validate_json(sidecar.read_text(encoding="utf-8")))
            except (OSError, ValidationError) as e:
                logger.debug("Skipping %s: %s", entry, e)
        return builds

    def get_default_version(self) -> str:
        text = self._default_path().read_text(encoding="utf-8")
        return normalize_version(text.strip().strip("/"))

    def set_default_version(self, version: str) -> None:
        with lock_file(self._root, GLOBAL_LOCK_KEY):
            if not self.version_dir(version).is_dir():
                raise NotInstalledError(version)
            self._write_default(version)

        logger.debug("Default version set to %s", version)

    def remove_default(self) -> None:
        with lock_file(self._root, GLOBAL_LOCK_KEY):
            self._default_path().unlink()

    def _default_path(self) -> Path:
        return self._root / DEFAULT_VERSION_FILENAME

    def _default_points_at(self, version: str) -> bool:
        try:
            current = self.get_default_version()
        except (FileNotFoundError, InvalidVersionError):
            return False
        return same_version(current, version)

    def _write_default(self, version: str) -> None:
        fd, tmp_name = tempfile.mkstemp(dir=self._root, prefix=".default_version.", suffix=".tmp")
        tmp = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(version)
            os.replace(tmp, self._default_path())
        except BaseException:
            tmp.unlink(missing_ok=True)
            raise

    def _write_install(self, build: Build, blob: bytes, folder: Path) -> None:
        binary = folder / build.name
        with open(binary, "xb") as f:
            f.write(blob)
        if os.name != "nt":
            binary.chmod(0o755)

        # Written last: a readable build.json marks a finished install
        with open(folder / BUILD_METADATA_FILENAME, "x", encoding="utf-8") as f:
            f.write(build.model_dump_json(by_alias=True))

    def _is_complete(self, build: Build, *, check_digest: bool) -> bool:
        folder = self.version_dir(build.version)
        binary = folder / build.name
        try:
            recorded = Build.model_validate_json(
                (folder / BUILD_METADATA_FILENAME).read_text(encoding="utf-8")
            )
        except (OSError, ValidationError):
            return False

        if not same_version(recorded.version, build.version) or not binary.is_file():
            return False
        if not check_digest or build.sha256 is None:
            return True
        return hashlib.sha256(binary.read_bytes()).hexdigest() == build.sha256
