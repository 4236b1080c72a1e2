"""Shared fixtures: an in-memory store and an ASGI client wired to it."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any, Callable

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from swfavorites.api.v1.dependencies import get_catalog_service, get_favorite_service
from swfavorites.application.services.catalog_service import CatalogService
from swfavorites.application.services.favorite_service import FavoriteService
from swfavorites.infrastructure.http.catalog_client import CatalogClient
from swfavorites.main import app
from tests.support.in_memory_repositories import InMemoryFavoriteRepository
from tests.support.swapi import CATALOG_BASE_URL, swapi_handler


@pytest.fixture
def repository() -> InMemoryFavoriteRepository:
    return InMemoryFavoriteRepository()


@pytest.fixture
def favorite_service(repository: InMemoryFavoriteRepository) -> FavoriteService:
    return FavoriteService(repository)


@pytest.fixture
def catalog_handler() -> Callable[[httpx.Request], Any]:
    """Upstream behavior for the catalog proxy; tests override this fixture."""
    return swapi_handler


@pytest.fixture
def catalog_service(catalog_handler: Callable[[httpx.Request], Any]) -> CatalogService:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(catalog_handler))
    return CatalogService(CatalogClient(http_client, CATALOG_BASE_URL))


@pytest_asyncio.fixture
async def api_client(
    favorite_service: FavoriteService,
    catalog_service: CatalogService,
) -> AsyncIterator[AsyncClient]:
    """Create an ``AsyncClient`` wired up with in-memory dependency overrides."""
    app.dependency_overrides.clear()
    app.dependency_overrides[get_favorite_service] = lambda: favorite_service
    app.dependency_overrides[get_catalog_service] = lambda: catalog_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client

    app.dependency_overrides.clear()
    await catalog_service.close()
