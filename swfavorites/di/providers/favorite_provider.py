from typing import TYPE_CHECKING

from ...domain.repositories.favorite_repository import FavoriteRepository
from ...application.services.favorite_service import FavoriteService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class FavoriteProvider:
    """Favorite service provider - registers favorite-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register favorite service.
        Service is created with repository from container.
        """
        container.register_singleton(
            FavoriteService,
            FavoriteService(
                favorite_repository=container.get(FavoriteRepository)
            )
        )
