"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
Startup: Settings → DI container → unique index on favorites.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from swfavorites import __version__
from swfavorites.api.v1 import favorite_router, catalog_router
from swfavorites.application.services.catalog_service import CatalogService
from swfavorites.application.services.favorite_service import FavoriteService
from swfavorites.core.config import get_settings
from swfavorites.di.container import get_container
from swfavorites.infrastructure.db.mongo_connection import MongoClientManager

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(application: FastAPI):
    """
    Application lifespan management.

    The process refuses to start serving if the document store is
    unreachable: creating the unique index on favorite names is the first
    store operation and its failure aborts startup.
    """
    container = get_container()
    logger.info("Starting SW Favorites API v%s", __version__)

    try:
        try:
            container.get(FavoriteService).prepare_storage()
        except Exception as e:
            logger.error(f"Could not prepare the favorites store: {e}", exc_info=True)
            raise

        logger.info("Application startup complete")
        yield
    finally:
        await container.get(CatalogService).close()
        container.get(MongoClientManager).close()
        logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging configuration
    - CORS middleware configuration
    - API route registration
    - Startup/shutdown handling through the lifespan context

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="SW Favorites API",
        description="Favorite Star Wars movies and characters, plus a Star Wars API proxy",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(favorite_router, prefix="/favorites")
    application.include_router(catalog_router)

    @application.get("/")
    async def root():
        """Root endpoint - service info."""
        return {
            "status": "running",
            "service": "SW Favorites API",
            "version": __version__,
            "docs": "/docs"
        }

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return application


# Create application instance
app = create_application()
