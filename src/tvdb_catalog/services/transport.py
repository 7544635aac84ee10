"""Blocking HTTP transport for catalog requests."""

from typing import Optional, Protocol

import httpx
import structlog

from tvdb_catalog.core.config import CatalogConfig
from tvdb_catalog.core.errors import TransportError

from .endpoints import Endpoint

logger = structlog.get_logger()


class Fetcher(Protocol):
    """Anything that can return the full body of an endpoint."""

    def fetch(self, endpoint: Endpoint) -> bytes:
        ...


class HttpFetcher:
    """Fetcher backed by a synchronous httpx client.

    Redirects are followed. Only connection failures and server errors
    (5xx) raise. Any other response body is returned as-is for the
    decoder to judge.
    """

    def __init__(self, config: CatalogConfig, transport: Optional[httpx.BaseTransport] = None):
        self.config = config
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                base_url=self.config.base_url,
                timeout=self.config.timeout,
                headers={"User-Agent": self.config.user_agent},
                transport=self._transport,
                follow_redirects=True,
            )
        return self._client

    def fetch(self, endpoint: Endpoint) -> bytes:
        client = self._get_client()
        logger.debug("catalog_request", path=endpoint.path)

        try:
            response = client.get(endpoint.path, params=endpoint.params)
        except httpx.RequestError as e:
            raise TransportError(f"Request failed: {e}", url=str(e.request.url)) from e

        if response.is_server_error:
            raise TransportError(
                f"Catalog returned {response.status_code}",
                url=str(response.url),
                status_code=response.status_code,
            )

        logger.debug("catalog_response", path=endpoint.path, status_code=response.status_code)
        return response.content

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "HttpFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
