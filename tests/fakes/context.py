"""Factory functions for creating test contexts."""

from pathlib import Path

from rvm.core.config import RvmConfig
from rvm.core.context import RvmContext
from rvm.core.platform import Platform
from rvm.core.storage.real import DataDirStorage
from tests.fakes.release_client import FakeReleaseClient
from tests.fakes.time import FakeTime
from tests.test_utils.builders import TEST_REPO_URL


def create_test_context(
    root: Path,
    *,
    client: FakeReleaseClient | None = None,
    time: FakeTime | None = None,
    offline: bool = False,
    nightly: bool = False,
) -> RvmContext:
    """Create a context over real storage in root with fake network and clock.

    Args:
        root: rvm root directory (usually under pytest's tmp_path)
        client: Optional FakeReleaseClient. If None, every request fails.
        time: Optional FakeTime to inspect backoff sleeps
        offline: Whether to run in offline mode
        nightly: Whether to merge the nightly channel

    Returns:
        Frozen RvmContext pinned to the Linux platform and TEST_REPO_URL

    Example:
        >>> build = make_build("0.1.0-dev.13")
        >>> ctx = create_test_context(tmp_path, client=make_client([build]))
        >>> ctx.version_manager().get_or_install("0.1.0-dev.13")
    """
    config = RvmConfig(
        root=root,
        repo_url=TEST_REPO_URL,
        nightly=nightly,
        download_timeout=5.0,
    )
    return RvmContext(
        config=config,
        storage=DataDirStorage.create(root, time if time is not None else FakeTime()),
        client=client if client is not None else FakeReleaseClient(),
        offline=offline,
        nightly=nightly,
        platform=Platform.LINUX,
    )
