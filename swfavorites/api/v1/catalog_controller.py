"""
Catalog Controller
==================

Pass-through endpoints for the Star Wars catalog API.
"""
from fastapi import APIRouter, Depends

from swfavorites.application.dto.catalog_dto import MoviesResponse, PeopleResponse
from swfavorites.application.dto.favorite_dto import MessageResponse
from swfavorites.api.v1.dependencies import get_catalog_service
from swfavorites.api.v1.favorite_controller import error_response
from swfavorites.application.services.catalog_service import CatalogService
from swfavorites.domain.errors import FavoritesError

router = APIRouter(tags=["catalog"])


@router.get(
    "/movies",
    response_model=MoviesResponse,
    responses={500: {"model": MessageResponse}},
    summary="List movies",
    description="Relay the upstream films listing unchanged."
)
async def get_movies(
    service: CatalogService = Depends(get_catalog_service),
):
    try:
        movies = await service.fetch_movies()
    except FavoritesError as e:
        return error_response(e)
    return MoviesResponse(movies=movies)


@router.get(
    "/people",
    response_model=PeopleResponse,
    responses={500: {"model": MessageResponse}},
    summary="List people",
    description="Relay the upstream people listing unchanged."
)
async def get_people(
    service: CatalogService = Depends(get_catalog_service),
):
    try:
        people = await service.fetch_people()
    except FavoritesError as e:
        return error_response(e)
    return PeopleResponse(people=people)
