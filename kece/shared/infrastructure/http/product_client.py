"""HTTP client for the product endpoint."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from kece.shared.domain.errors import HttpError, NetworkError
from kece.shared.domain.render_state import Err, ErrorInfo, Ok, Result

logger = logging.getLogger(__name__)


class ProductClient:
    """Fetches the product text with a single GET request.

    One instance is created at application start and passed to whatever needs
    it. There are no retries and no caching: every call to
    :meth:`fetch_product` issues exactly one request.
    """

    DEFAULT_ENDPOINT = "https://marketfake.fly.dev/product"

    def __init__(
        self,
        endpoint_url: str = DEFAULT_ENDPOINT,
        timeout: float = 10.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Initialize the client.

        Args:
            endpoint_url: URL requested by :meth:`fetch_product`
            timeout: Request timeout in seconds (ignored when ``http_client`` is given)
            http_client: Pre-built httpx client, e.g. one using ``httpx.MockTransport``
        """
        self.endpoint_url = endpoint_url
        self.timeout = timeout
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    async def fetch_product(self) -> Result[str]:
        """GET the product endpoint.

        Returns:
            ``Ok(body)`` on a 2xx response, otherwise ``Err(ErrorInfo)``
            describing the HTTP or transport failure.
        """
        logger.debug(f"GET {self.endpoint_url}")
        try:
            response = await self._client.get(self.endpoint_url)
        except httpx.TransportError as exc:
            error = NetworkError(str(exc) or type(exc).__name__, cause=exc)
            logger.warning(f"Product request failed: {error.message}")
            return Err(ErrorInfo.from_exception(error))

        if response.is_success:
            logger.info(f"Product fetched ({response.status_code}, {len(response.content)} bytes)")
            return Ok(response.text)

        error = HttpError(response.status_code, response.text)
        logger.warning(f"Product endpoint returned {response.status_code}: {error.message}")
        return Err(ErrorInfo.from_exception(error))

    async def aclose(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "ProductClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
