"""
Catalog Service
===============

Pass-through access to the Star Wars catalog API.
"""
from typing import Any

from swfavorites.infrastructure.http.catalog_client import CatalogClient


class CatalogService:
    """Relays upstream film and people listings without caching or paging."""

    def __init__(self, catalog_client: CatalogClient):
        self._client = catalog_client

    async def fetch_movies(self) -> Any:
        """Fetch the upstream films listing verbatim."""
        return await self._client.get_films()

    async def fetch_people(self) -> Any:
        """Fetch the upstream people listing verbatim."""
        return await self._client.get_people()

    async def close(self) -> None:
        await self._client.close()
