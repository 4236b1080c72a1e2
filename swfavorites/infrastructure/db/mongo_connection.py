"""
MongoDB Connection
==================

MongoDB client manager for database connections.
"""
import logging
from typing import Optional
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.collection import Collection

logger = logging.getLogger(__name__)


class MongoClientManager:
    """
    MongoDB client manager.

    Manages one MongoDB connection and provides access to collections.
    Constructed explicitly from settings and injected where needed.
    """

    def __init__(
        self,
        mongo_uri: str,
        database_name: str,
        server_selection_timeout_ms: int = 5000,
    ) -> None:
        if not mongo_uri:
            raise RuntimeError("MONGO_URI not set. Please configure it in your .env file.")
        self._mongo_uri = mongo_uri
        self._database_name = database_name
        self._server_selection_timeout_ms = server_selection_timeout_ms
        self._client: Optional[MongoClient] = None
        self._database: Optional[Database] = None

    def _initialize_client(self) -> None:
        """Initialize MongoDB client connection."""
        if self._client is not None:
            return  # Already initialized

        # MongoClient connects lazily; the first operation selects a server
        self._client = MongoClient(
            self._mongo_uri,
            serverSelectionTimeoutMS=self._server_selection_timeout_ms,
        )
        self._database = self._client[self._database_name]
        logger.info("MongoDB client created for database '%s'", self._database_name)

    def get_database(self) -> Database:
        """Get MongoDB database instance."""
        if self._database is None:
            self._initialize_client()
        return self._database

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a MongoDB collection.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB Collection object
        """
        database = self.get_database()
        return database[collection_name]

    def close(self) -> None:
        """Close MongoDB connection."""
        if self._client:
            self._client.close()
            self._client = None
            self._database = None
            logger.info("MongoDB connection closed")
