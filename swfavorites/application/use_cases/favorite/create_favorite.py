"""
Create Favorite Use Case
========================

Business use case for saving a new favorite movie or character.
"""
import logging
from typing import Optional

from swfavorites.domain.errors import ConflictError, InvalidInputError
from swfavorites.domain.models.favorite import Favorite
from swfavorites.domain.repositories.favorite_repository import FavoriteRepository
from swfavorites.domain.validation import validate_favorite

logger = logging.getLogger(__name__)


class CreateFavoriteUseCase:
    """
    Use case for creating a favorite.

    Validation and the duplicate check both run before anything is written,
    so a rejected submission leaves the store untouched. The lookup and the
    insert are not atomic; the store's unique index settles concurrent
    submissions of the same name.
    """

    def __init__(self, favorite_repository: FavoriteRepository):
        """
        Initialize use case with repository.

        Args:
            favorite_repository: Repository for favorite persistence
        """
        self._repository = favorite_repository

    def execute(self, name: Optional[str], favorite_type: Optional[str], url: Optional[str]) -> Favorite:
        """
        Execute the create favorite use case.

        Args:
            name: Favorite name, unique across the collection
            favorite_type: "movie" or "character"
            url: Reference URL, stored as given

        Returns:
            Stored favorite entity with its identifier

        Raises:
            InvalidInputError: If validation fails
            ConflictError: If a favorite with this name already exists
            StorageFailureError: If the store cannot be read or written
        """
        error = validate_favorite(name, favorite_type)
        if error is not None:
            logger.info(f"Rejected favorite {name!r}: {error}")
            raise InvalidInputError(error)

        if self._repository.find_by_name(name) is not None:
            logger.info(f"Rejected favorite {name!r}: already exists")
            raise ConflictError()

        favorite = Favorite(name=name, type=favorite_type, url=url)
        saved = self._repository.insert(favorite)
        logger.info(f"Saved favorite {saved.name!r} ({saved.type}) as {saved.id}")
        return saved
