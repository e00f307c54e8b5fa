"""
Name: Documentation HTTP client.
Description: Fetches pages from the documentation site over HTTP. Every failure, whether a non-2xx status, a malformed URL or a transport error, surfaces as a single NetworkError; nothing is retried.
"""

import logging
from typing import Optional

import httpx

from ..exceptions import NetworkError
from ..utils import ServiceConfig

logger = logging.getLogger(__name__)


class DocumentationClient:
    """Async HTTP client for the documentation site."""

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            config: Service configuration (user agent, timeout)
            transport: Optional httpx transport, mainly for tests
        """
        self.config = config or ServiceConfig()
        self._transport = transport

    def _create_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers={"User-Agent": self.config.user_agent},
            timeout=self.config.timeout,
            follow_redirects=True,
            transport=self._transport,
        )

    async def fetch(self, url: str) -> str:
        """GET a page and return its body.

        Args:
            url: Absolute URL of the page

        Returns:
            Response body as text

        Raises:
            NetworkError: If the URL is malformed, the request fails or the status is not 2xx
        """
        logger.debug(f"Fetching {url}")
        try:
            async with self._create_client() as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            raise NetworkError(
                f"Failed to fetch {url}: {status_code}", status_code=status_code
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NetworkError(f"Failed to fetch {url}: {e}") from e

        logger.debug(f"Loaded {url}, length: {len(response.text)}")
        return response.text
