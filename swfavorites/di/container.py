from typing import Optional

from swfavorites.core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import (
    CatalogProvider,
    DatabaseProvider,
    FavoriteProvider,
    RepositoryProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Services (FavoriteProvider) - depend on repositories
    4. Catalog proxy (CatalogProvider) - independent of the database
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services
        """
        self.register_singleton(Settings, self.settings)
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        FavoriteProvider.register(self)
        CatalogProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Drop the global container so the next call builds a fresh one."""
    global _container
    _container = None
