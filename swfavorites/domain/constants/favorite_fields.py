"""Constants for Favorite model field names"""


class FavoriteFields:
    """Field name constants for Favorite model"""
    NAME = "name"
    TYPE = "type"
    URL = "url"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field


class FavoriteType:
    """Allowed values for Favorite.type"""
    MOVIE = "movie"
    CHARACTER = "character"

    ALL = (MOVIE, CHARACTER)
