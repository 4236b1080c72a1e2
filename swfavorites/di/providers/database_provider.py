from typing import TYPE_CHECKING

from swfavorites.core.config import Settings
from ...infrastructure.db.mongo_connection import MongoClientManager

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the MongoDB client manager built from settings.
        Repositories get their collections from this manager.
        """
        settings = container.get(Settings)
        mongo_client = MongoClientManager(
            mongo_uri=settings.mongo_uri,
            database_name=settings.mongo_database_name,
            server_selection_timeout_ms=settings.mongo_server_selection_timeout_ms,
        )
        container.register_singleton(MongoClientManager, mongo_client)
