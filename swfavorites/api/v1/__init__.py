"""
API v1 Package
===============

Version 1 API controllers.
"""
from .favorite_controller import router as favorite_router
from .catalog_controller import router as catalog_router

__all__ = ["favorite_router", "catalog_router"]
