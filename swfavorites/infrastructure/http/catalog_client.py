"""
Catalog Client
==============

Read-only HTTP client for the Star Wars catalog API (swapi.dev).
"""
import logging
from typing import Any, Optional

import httpx

from swfavorites.domain.errors import UpstreamFailureError

logger = logging.getLogger(__name__)


class CatalogClient:
    """
    Thin wrapper around a shared ``httpx.AsyncClient``.

    Every failure (transport error, non-2xx status, invalid JSON) is
    reported as UpstreamFailureError. There are no retries.
    """

    FILMS_PATH = "/films"
    PEOPLE_PATH = "/people"

    def __init__(self, http_client: httpx.AsyncClient, base_url: str) -> None:
        self._http_client = http_client
        self._base_url = base_url.rstrip("/")

    async def get_json(self, path: str) -> Any:
        """
        GET ``path`` below the base URL and return the decoded JSON body.

        Args:
            path: Resource path, e.g. "/films"

        Returns:
            Decoded JSON body, unchanged
        """
        url = f"{self._base_url}{path}"
        try:
            response = await self._http_client.get(url)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Catalog returned status {e.response.status_code} for {url}")
            raise UpstreamFailureError() from e
        except httpx.HTTPError as e:
            logger.error(f"Catalog request to {url} failed: {e!r}")
            raise UpstreamFailureError() from e
        except ValueError as e:
            logger.error(f"Catalog returned invalid JSON for {url}: {e}")
            raise UpstreamFailureError() from e

    async def get_films(self) -> Any:
        """Fetch the films collection."""
        return await self.get_json(self.FILMS_PATH)

    async def get_people(self) -> Any:
        """Fetch the people collection."""
        return await self.get_json(self.PEOPLE_PATH)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._http_client.aclose()


def create_http_client(
    timeout_seconds: float,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Create the shared HTTP client used for catalog requests."""
    # swapi.dev redirects /films to /films/
    return httpx.AsyncClient(
        timeout=timeout_seconds,
        follow_redirects=True,
        transport=transport,
    )
