"""Tests for application wiring: service info, health, startup and shutdown."""

import pytest

from swfavorites.main import app, lifespan


@pytest.mark.asyncio
async def test_health(api_client):
    response = await api_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


@pytest.mark.asyncio
async def test_root_reports_service(api_client):
    body = (await api_client.get("/")).json()

    assert body["status"] == "running"
    assert body["service"] == "SW Favorites API"


class FakeContainer:
    def __init__(self, instances):
        self.instances = instances

    def get(self, interface):
        return self.instances[interface]


class FakeMongoClient:
    closed = False

    def close(self):
        self.closed = True


@pytest.mark.asyncio
async def test_lifespan_prepares_store_and_closes_clients(monkeypatch, favorite_service, repository, catalog_service):
    from swfavorites import main
    from swfavorites.application.services.catalog_service import CatalogService
    from swfavorites.application.services.favorite_service import FavoriteService
    from swfavorites.infrastructure.db.mongo_connection import MongoClientManager

    mongo_client = FakeMongoClient()
    container = FakeContainer({
        FavoriteService: favorite_service,
        CatalogService: catalog_service,
        MongoClientManager: mongo_client,
    })
    monkeypatch.setattr(main, "get_container", lambda: container)

    async with lifespan(app):
        assert repository.indexes_ensured is True

    assert mongo_client.closed is True


@pytest.mark.asyncio
async def test_lifespan_fails_when_store_is_unreachable(monkeypatch, favorite_service, repository, catalog_service):
    from swfavorites import main
    from swfavorites.application.services.catalog_service import CatalogService
    from swfavorites.application.services.favorite_service import FavoriteService
    from swfavorites.infrastructure.db.mongo_connection import MongoClientManager

    def unreachable():
        raise RuntimeError("store unreachable")

    monkeypatch.setattr(repository, "ensure_indexes", unreachable)
    mongo_client = FakeMongoClient()
    container = FakeContainer({
        FavoriteService: favorite_service,
        CatalogService: catalog_service,
        MongoClientManager: mongo_client,
    })
    monkeypatch.setattr(main, "get_container", lambda: container)

    with pytest.raises(RuntimeError, match="store unreachable"):
        async with lifespan(app):
            pass

    assert mongo_client.closed is True
    assert catalog_service._client._http_client.is_closed
