"""
Catalog DTO
===========

Response wrappers for the catalog pass-through endpoints.
The upstream body is relayed unchanged.
"""
from typing import Any
from pydantic import BaseModel


class MoviesResponse(BaseModel):
    """DTO wrapping the upstream films listing."""
    movies: Any


class PeopleResponse(BaseModel):
    """DTO wrapping the upstream people listing."""
    people: Any
