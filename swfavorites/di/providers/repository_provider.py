from typing import TYPE_CHECKING

from swfavorites.core.config import Settings
from ...domain.repositories.favorite_repository import FavoriteRepository
from ...infrastructure.db.mongo_connection import MongoClientManager
from ...infrastructure.db.mongo_favorite_repository import MongoFavoriteRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets database client from database provider and creates repository instances.
        """
        mongo_client = container.get(MongoClientManager)
        settings = container.get(Settings)

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            FavoriteRepository,
            MongoFavoriteRepository(
                mongo_client.get_collection(settings.favorites_collection)
            )
        )
