"""httpx-backed release client."""

import logging

import httpx
from pydantic import ValidationError

from rvm.core.constants import DOWNLOAD_TIMEOUT_SECONDS
from rvm.core.errors import FetchError
from rvm.core.http.abc import ReleaseClient
from rvm.core.releases import Releases
from rvm.version import __version__

logger = logging.getLogger(__name__)


class HttpReleaseClient(ReleaseClient):
    """Blocking HTTP client for the resolc-bin manifests and release assets.

    Redirects are followed since release assets are served from a CDN.
    """

    def __init__(
        self,
        *,
        timeout: float = DOWNLOAD_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Create the client.

        Args:
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self._timeout = timeout
        self._transport = transport

    def fetch_releases(self, url: str) -> Releases:
        content = self._get(url)
        try:
            return Releases.model_validate_json(content)
        except ValidationError as e:
            raise FetchError(url, f"invalid release manifest: {e}") from e

    def download(self, url: str) -> bytes:
        return self._get(url)

    def _get(self, url: str) -> bytes:
        logger.debug("GET %s", url)
        try:
            with httpx.Client(
                timeout=self._timeout,
                follow_redirects=True,
                transport=self._transport,
                headers={"User-Agent": f"rvm/{__version__}"},
            ) as client:
                response = client.get(url)
                response.raise_for_status()
                return response.content
        except httpx.HTTPStatusError as e:
            raise FetchError(url, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise FetchError(url, str(e) or type(e).__name__) from e
        except httpx.InvalidURL as e:
            raise FetchError(url, f"invalid URL: {e}") from e
