"""
MongoDB Favorite Repository
===========================

Concrete implementation of FavoriteRepository using MongoDB.
"""
import logging
from typing import List, Optional
from pymongo import ASCENDING
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError

from swfavorites.domain.models.favorite import Favorite
from swfavorites.domain.repositories.favorite_repository import FavoriteRepository
from swfavorites.domain.constants.favorite_fields import FavoriteFields
from swfavorites.domain.errors import ConflictError, StorageFailureError

logger = logging.getLogger(__name__)


class MongoFavoriteRepository(FavoriteRepository):
    """
    MongoDB implementation of FavoriteRepository.

    Name uniqueness is enforced by a unique index; a duplicate-key error on
    insert is reported as ConflictError.
    """

    NAME_INDEX = "uniq_favorite_name"

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    def _to_entity(self, doc: dict) -> Favorite:
        """Convert MongoDB document to Favorite entity."""
        return Favorite(
            id=str(doc[FavoriteFields.MONGO_ID]),
            name=doc[FavoriteFields.NAME],
            type=doc[FavoriteFields.TYPE],
            url=doc.get(FavoriteFields.URL),
        )

    def _to_document(self, favorite: Favorite) -> dict:
        """Convert Favorite entity to MongoDB document."""
        return {
            FavoriteFields.NAME: favorite.name,
            FavoriteFields.TYPE: favorite.type,
            FavoriteFields.URL: favorite.url,
        }

    def find_all(self) -> List[Favorite]:
        """Find all favorites, oldest first."""
        try:
            docs = self._collection.find().sort(FavoriteFields.MONGO_ID, ASCENDING)
            return [self._to_entity(doc) for doc in docs]
        except PyMongoError as e:
            logger.error(f"Failed to list favorites: {e}")
            raise StorageFailureError() from e

    def find_by_name(self, name: str) -> Optional[Favorite]:
        """Find a favorite by its exact name."""
        try:
            doc = self._collection.find_one({FavoriteFields.NAME: name})
        except PyMongoError as e:
            logger.error(f"Failed to look up favorite '{name}': {e}")
            raise StorageFailureError() from e
        if not doc:
            return None
        return self._to_entity(doc)

    def insert(self, favorite: Favorite) -> Favorite:
        """Insert a new favorite and return it with its assigned id."""
        doc = self._to_document(favorite)
        try:
            # insert_one adds _id to the dict it is given
            result = self._collection.insert_one(dict(doc))
        except DuplicateKeyError as e:
            logger.info(f"Favorite '{favorite.name}' rejected by unique index")
            raise ConflictError() from e
        except PyMongoError as e:
            logger.error(f"Failed to save favorite '{favorite.name}': {e}")
            raise StorageFailureError() from e

        return self._to_entity({**doc, FavoriteFields.MONGO_ID: result.inserted_id})

    def ensure_indexes(self) -> None:
        """Create the unique index on favorite names."""
        self._collection.create_index(
            [(FavoriteFields.NAME, ASCENDING)],
            name=self.NAME_INDEX,
            unique=True,
        )
