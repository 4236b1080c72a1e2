"""
Favorite Controller
===================

FastAPI controller for favorite endpoints.

Handlers are plain functions so FastAPI runs the blocking pymongo calls
in its threadpool.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from swfavorites.application.dto.favorite_dto import (
    FavoriteCreateRequest,
    FavoriteCreatedResponse,
    FavoriteListResponse,
    FavoriteResponse,
    MessageResponse,
)
from swfavorites.api.v1.dependencies import get_favorite_service
from swfavorites.application.services.favorite_service import FavoriteService
from swfavorites.domain.errors import FavoritesError

router = APIRouter(tags=["favorites"])


def error_response(error: FavoritesError) -> JSONResponse:
    """Convert a domain error into the JSON error body."""
    return JSONResponse(
        status_code=error.status_code,
        content={"message": error.message},
    )


@router.get(
    "",
    response_model=FavoriteListResponse,
    responses={500: {"model": MessageResponse}},
    summary="List favorites",
    description="Get all saved favorites in the order they were created."
)
def list_favorites(
    service: FavoriteService = Depends(get_favorite_service),
):
    """List all favorites."""
    try:
        favorites = service.list_favorites()
    except FavoritesError as e:
        return error_response(e)

    return FavoriteListResponse(
        favorites=[FavoriteResponse.from_entity(fav) for fav in favorites]
    )


@router.post(
    "",
    response_model=FavoriteCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={500: {"model": MessageResponse}},
    summary="Save a favorite",
    description="""
    Save a favorite movie or character.

    1. "type" must be exactly "movie" or "character"
    2. "name" must not already be saved
    3. The favorite is stored and returned with its id
    """
)
def create_favorite(
    request: Optional[FavoriteCreateRequest] = None,
    service: FavoriteService = Depends(get_favorite_service),
):
    """Save a new favorite."""
    # A missing body is validated like an empty one
    request = request or FavoriteCreateRequest()
    try:
        favorite = service.create_favorite(
            name=request.name,
            favorite_type=request.type,
            url=request.url,
        )
    except FavoritesError as e:
        return error_response(e)

    return FavoriteCreatedResponse(favorite=FavoriteResponse.from_entity(favorite))
