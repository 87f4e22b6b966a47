"""Cross-process advisory locks backed by lock files under the rvm root.

A lock is held for the duration of a ``with lock_file(root, key):`` block.
The lock file is created (or truncated, if a crashed process left one
behind) on entry and deleted on exit. Only the OS lock excludes other
processes, so a leftover file never blocks anyone, and the OS drops the
lock by itself when a holder dies.
"""

import contextlib
import errno
import logging
import os
from collections.abc import Iterator
from pathlib import Path
from typing import IO

from rvm.core.constants import LOCK_FILE_PREFIX

logger = logging.getLogger(__name__)

_WINDOWS = os.name == "nt"


def lock_path(root: Path, key: str) -> Path:
    """Path of the lock file guarding key."""
    return root / f"{LOCK_FILE_PREFIX}{key}"


@contextlib.contextmanager
def lock_file(root: Path, key: str) -> Iterator[Path]:
    """Hold the exclusive lock for key until the block exits.

    Blocks until the OS grants the lock. The lock is released and its file
    removed on every exit path, including exceptions raised inside the block.

    Args:
        root: Directory the lock file lives in
        key: Lock name, a version string or GLOBAL_LOCK_KEY

    Yields:
        Path of the held lock file
    """
    path = lock_path(root, key)
    handle = _acquire(path)
    logger.debug("Acquired lock %s", path)
    try:
        yield path
    finally:
        _release(handle, path)
        logger.debug("Released lock %s", path)


def _acquire(path: Path) -> IO[bytes]:
    while True:
        handle = open(path, "wb")
        try:
            _lock_exclusive(handle)
        except BaseException:
            handle.close()
            raise

        if _WINDOWS or _still_linked(handle, path):
            return handle

        # The previous holder unlinked the file while we were waiting on it;
        # whoever opens the path now gets a new file, so lock that one instead.
        logger.debug("Lock file %s was replaced while waiting, retrying", path)
        _unlock(handle)
        handle.close()


def _release(handle: IO[bytes], path: Path) -> None:
    try:
        if not _WINDOWS:
            # Unlink before unlocking so waiters notice the file is gone
            path.unlink(missing_ok=True)
        _unlock(handle)
    finally:
        handle.close()
        if _WINDOWS:
            # Another process still waiting on the file keeps it open and
            # deletes it on its own release.
            with contextlib.suppress(PermissionError):
                path.unlink(missing_ok=True)


def _still_linked(handle: IO[bytes], path: Path) -> bool:
    try:
        on_disk = os.stat(path)
    except FileNotFoundError:
        return False
    held = os.fstat(handle.fileno())
    return (on_disk.st_dev, on_disk.st_ino) == (held.st_dev, held.st_ino)


def _lock_exclusive(handle: IO[bytes]) -> None:
    if _WINDOWS:
        import msvcrt

        # LK_LOCK gives up after ten one-second attempts; keep waiting like flock
        while True:
            try:
                msvcrt.locking(handle.fileno(), msvcrt.LK_LOCK, 1)
                return
            except OSError as e:
                if e.errno != errno.EDEADLOCK:
                    raise
    else:
        import fcntl

        fcntl.flock(handle.fileno(), fcntl.LOCK_EX)


def _unlock(handle: IO[bytes]) -> None:
    if _WINDOWS:
        import msvcrt

        handle.seek(0)
        msvcrt.locking(handle.fileno(), msvcrt.LK_UNLCK, 1)
    else:
        import fcntl

        fcntl.flock(handle.fileno(), fcntl.LOCK_UN)
