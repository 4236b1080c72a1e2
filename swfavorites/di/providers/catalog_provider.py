from typing import TYPE_CHECKING

from swfavorites.core.config import Settings
from ...application.services.catalog_service import CatalogService
from ...infrastructure.http.catalog_client import CatalogClient, create_http_client

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CatalogProvider:
    """Catalog provider - registers the Star Wars API proxy"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register catalog service.
        One HTTP client is shared by all catalog requests.
        """
        settings = container.get(Settings)
        catalog_client = CatalogClient(
            http_client=create_http_client(settings.catalog_timeout_seconds),
            base_url=settings.catalog_base_url,
        )
        container.register_singleton(
            CatalogService,
            CatalogService(catalog_client=catalog_client)
        )
