"""Abstract interface for fetching release manifests and binaries."""

from abc import ABC, abstractmethod

from rvm.core.releases import Releases


class ReleaseClient(ABC):
    """Network access needed by the version manager."""

    @abstractmethod
    def fetch_releases(self, url: str) -> Releases:
        """Download and decode a list.json release manifest.

        Raises:
            FetchError: On network failure, error status or an invalid manifest
        """
        ...

    @abstractmethod
    def download(self, url: str) -> bytes:
        """Download a binary blob.

        Raises:
            FetchError: On network failure or error status
        """
        ...
