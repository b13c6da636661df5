"""
HTTP Source Adapter.

Fetches the dataset document with a single GET request.
"""

import logging

import httpx

from phgeo.exceptions import FetchError

from .base_adapter import AdapterConfig, BaseSourceAdapter

logger = logging.getLogger(__name__)


class HTTPAdapter(BaseSourceAdapter):
    """
    Adapter that downloads the dataset over HTTP.

    Sends one plain GET (no auth, no query parameters, no custom headers)
    and maps every transport or status failure to FetchError. Each fetch
    opens and closes its own client, so no pooled connection outlives the
    event loop that created it.
    """

    def __init__(
        self,
        config: AdapterConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the HTTP adapter.

        Args:
            config: AdapterConfig with the dataset URL and timeout
            transport: Optional httpx transport (used by tests to mock responses)
        """
        self._transport = transport
        super().__init__(config)

    def _validate_config(self) -> None:
        """Validate HTTP configuration."""
        if not self.config.url:
            raise ValueError("HTTP adapter requires a url")
        if not self.config.url.startswith(("http://", "https://")):
            raise ValueError(f"HTTP adapter requires an http(s) url, got {self.config.url!r}")

    def _build_client(self) -> httpx.AsyncClient:
        """Create an async HTTP client for a single fetch."""
        return httpx.AsyncClient(
            timeout=self.config.request_timeout,
            transport=self._transport,
        )

    async def fetch(self) -> str:
        """
        Download the dataset document.

        Returns:
            Response body decoded as text

        Raises:
            FetchError: On transport failure or a non-2xx status
        """
        url = self.config.url

        async with self._build_client() as client:
            try:
                response = await client.get(url)
            except httpx.HTTPError as e:
                logger.debug(f"Request to {url} failed: {e}")
                raise FetchError(f"Failed to fetch data ({e})", url=url) from e

        if not response.is_success:
            logger.debug(f"Request to {url} returned {response.status_code}")
            raise FetchError(
                f"Failed to fetch data ({response.status_code} {response.reason_phrase})",
                url=url,
                status_code=response.status_code,
            )

        logger.debug(f"Fetched {len(response.content)} bytes from {url}")
        return response.text
