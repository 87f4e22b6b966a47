"""Application context with dependency injection."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from rvm.core.config import RvmConfig, load_config
from rvm.core.http.abc import ReleaseClient
from rvm.core.http.real import HttpReleaseClient
from rvm.core.manager import VersionManager
from rvm.core.platform import Platform
from rvm.core.storage.abc import Storage
from rvm.core.storage.real import DataDirStorage
from rvm.core.time.real import RealTime


@dataclass(frozen=True)
class RvmContext:
    """Immutable context holding all dependencies for rvm operations.

    Created at the CLI entry point and threaded through commands. Tests build
    one with fakes and pass it as the click ``obj``.
    """

    config: RvmConfig
    storage: Storage
    client: ReleaseClient
    offline: bool
    nightly: bool
    platform: Platform | None = None

    def version_manager(self) -> VersionManager:
        """Load the release catalog and create a manager for this invocation."""
        return VersionManager.create(
            self.storage,
            self.client,
            offline=self.offline,
            repo_url=self.config.repo_url,
            nightly=self.nightly,
            platform=self.platform,
        )


def create_context(
    *,
    offline: bool,
    nightly: bool = False,
    env: Mapping[str, str] | None = None,
) -> RvmContext:
    """Create the production context.

    Args:
        offline: Run without network access
        nightly: Include the nightly channel (also enabled by config)
        env: Environment for configuration overrides (defaults to os.environ)
    """
    config = load_config(os.environ if env is None else env)
    return RvmContext(
        config=config,
        storage=DataDirStorage.create(config.root, RealTime()),
        client=HttpReleaseClient(timeout=config.download_timeout),
        offline=offline,
        nightly=nightly or config.nightly,
    )
