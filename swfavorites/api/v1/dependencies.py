"""
Dependency Container
====================

Dependency injection for FastAPI.
Provides singleton instances of services from the DI container.
Tests replace these through ``app.dependency_overrides``.
"""
from swfavorites.application.services.catalog_service import CatalogService
from swfavorites.application.services.favorite_service import FavoriteService
from swfavorites.di.container import get_container


def get_favorite_service() -> FavoriteService:
    """
    Get favorite service instance (singleton).

    Returns:
        FavoriteService instance
    """
    container = get_container()
    return container.get(FavoriteService)


def get_catalog_service() -> CatalogService:
    """
    Get catalog service instance (singleton).

    Returns:
        CatalogService instance
    """
    container = get_container()
    return container.get(CatalogService)
