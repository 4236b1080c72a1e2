"""
Favorite Model
==============

Domain model representing a favorite movie or character.
This is a pure domain object with no infrastructure dependencies.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class Favorite:
    """
    Favorite domain model.

    ``id`` is assigned by the store on insert and is never set by callers.
    Favorites are created once and never mutated afterwards.
    """
    name: str
    type: str  # "movie" | "character"
    url: Optional[str] = None
    id: Optional[str] = None
