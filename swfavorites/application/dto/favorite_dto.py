"""
Favorite DTO
============

Pydantic models for favorite API requests and responses.
"""
from typing import List, Optional
from pydantic import BaseModel, Field

from swfavorites.domain.models.favorite import Favorite


class FavoriteCreateRequest(BaseModel):
    """DTO for creating a favorite."""
    # Optional at the schema level: domain validation produces the error message
    name: Optional[str] = Field(None, description="Unique favorite name")
    type: Optional[str] = Field(None, description="Either 'movie' or 'character'")
    url: Optional[str] = Field(None, description="Reference URL, stored as given")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "A New Hope",
                "type": "movie",
                "url": "https://swapi.dev/api/films/1/"
            }
        }


class FavoriteResponse(BaseModel):
    """DTO for favorite data."""
    id: str
    name: str
    type: str
    url: Optional[str] = None

    @classmethod
    def from_entity(cls, favorite: Favorite) -> "FavoriteResponse":
        return cls(
            id=favorite.id,
            name=favorite.name,
            type=favorite.type,
            url=favorite.url,
        )


class FavoriteListResponse(BaseModel):
    """DTO for the favorites listing."""
    favorites: List[FavoriteResponse]


class FavoriteCreatedResponse(BaseModel):
    """DTO returned after a favorite is saved."""
    message: str = "Favorite saved!"
    favorite: FavoriteResponse

    class Config:
        json_schema_extra = {
            "example": {
                "message": "Favorite saved!",
                "favorite": {
                    "id": "6528f0c2a1b4e3d2c1f0a9b8",
                    "name": "Luke Skywalker",
                    "type": "character",
                    "url": "https://swapi.dev/api/people/1/"
                }
            }
        }


class MessageResponse(BaseModel):
    """DTO for error bodies."""
    message: str
