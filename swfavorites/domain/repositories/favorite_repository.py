"""
Favorite Repository Interface
=============================

Abstract interface for favorite data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from swfavorites.domain.models.favorite import Favorite


class FavoriteRepository(ABC):
    """
    Abstract repository for favorite persistence operations.

    Implementations raise ConflictError when the store rejects a duplicate
    name and StorageFailureError for any other store error.
    """

    @abstractmethod
    def find_all(self) -> List[Favorite]:
        """
        Find all favorites.

        Returns:
            List of favorite entities in insertion order
        """
        pass

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Favorite]:
        """
        Find a favorite by its exact name.

        Args:
            name: Favorite name

        Returns:
            Favorite entity if found, None otherwise
        """
        pass

    @abstractmethod
    def insert(self, favorite: Favorite) -> Favorite:
        """
        Insert a new favorite.

        Args:
            favorite: Favorite entity without an identifier

        Returns:
            Stored favorite entity with its assigned identifier
        """
        pass

    @abstractmethod
    def ensure_indexes(self) -> None:
        """Create the unique index on favorite names if missing."""
        pass
