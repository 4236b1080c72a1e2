"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .favorite_provider import FavoriteProvider
from .catalog_provider import CatalogProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "FavoriteProvider",
    "CatalogProvider",
]
