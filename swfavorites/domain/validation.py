"""
Favorite Validation
===================

Pure validation for favorite submissions. Nothing here touches the store.
"""
from typing import Optional

from swfavorites.domain.constants.favorite_fields import FavoriteType

INVALID_TYPE_MESSAGE = '"type" should be "movie" or "character"!'
EMPTY_NAME_MESSAGE = '"name" should not be empty!'


def validate_favorite(name: Optional[str], favorite_type: Optional[str]) -> Optional[str]:
    """
    Validate a favorite submission.

    Args:
        name: Submitted favorite name
        favorite_type: Submitted type, compared case-sensitively

    Returns:
        The error message for the first failed rule, or None if valid
    """
    if favorite_type not in FavoriteType.ALL:
        return INVALID_TYPE_MESSAGE
    if not name:
        return EMPTY_NAME_MESSAGE
    return None
