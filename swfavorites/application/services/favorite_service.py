"""
Favorite Service
================

Application service that coordinates favorite-related operations.
This service orchestrates the favorite use cases.
"""
from typing import List, Optional

from swfavorites.domain.models.favorite import Favorite
from swfavorites.domain.repositories.favorite_repository import FavoriteRepository
from swfavorites.application.use_cases.favorite.create_favorite import CreateFavoriteUseCase
from swfavorites.application.use_cases.favorite.list_favorites import ListFavoritesUseCase


class FavoriteService:
    """
    Application service for favorite operations.

    Favorites can only be created and listed; there is no update or delete.
    """

    def __init__(self, favorite_repository: FavoriteRepository):
        """
        Initialize service with repository.

        Args:
            favorite_repository: Repository for favorite persistence
        """
        self._repository = favorite_repository
        self._create_use_case = CreateFavoriteUseCase(favorite_repository)
        self._list_use_case = ListFavoritesUseCase(favorite_repository)

    def create_favorite(
        self,
        name: Optional[str],
        favorite_type: Optional[str],
        url: Optional[str] = None,
    ) -> Favorite:
        """
        Validate and save a new favorite.

        Args:
            name: Favorite name
            favorite_type: "movie" or "character"
            url: Reference URL

        Returns:
            Stored favorite entity
        """
        return self._create_use_case.execute(name=name, favorite_type=favorite_type, url=url)

    def list_favorites(self) -> List[Favorite]:
        """
        List all favorites in insertion order.

        Returns:
            List of favorite entities
        """
        return self._list_use_case.execute()

    def prepare_storage(self) -> None:
        """Create store indexes. Called once at startup."""
        self._repository.ensure_indexes()
