"""
List Favorites Use Case
=======================

Returns every stored favorite, oldest first.
"""
from typing import List

from swfavorites.domain.models.favorite import Favorite
from swfavorites.domain.repositories.favorite_repository import FavoriteRepository


class ListFavoritesUseCase:
    """Use case for listing all favorites without filtering."""

    def __init__(self, favorite_repository: FavoriteRepository):
        self._repository = favorite_repository

    def execute(self) -> List[Favorite]:
        return self._repository.find_all()
