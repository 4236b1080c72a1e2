"""
Domain Errors
=============

Error taxonomy for favorites and catalog operations.

Every error carries the HTTP status code and the message returned to the
caller. Client-caused errors are answered with 500 as well; change
``status_code`` on a subclass to move one of them to the 4xx range.
"""

GENERIC_ERROR_MESSAGE = "Something went wrong."


class FavoritesError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 500

    def __init__(self, message: str = GENERIC_ERROR_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(FavoritesError):
    """Submission failed a domain validation rule."""


class ConflictError(FavoritesError):
    """A favorite with the same name already exists."""

    def __init__(self, message: str = "Favorite exists already!") -> None:
        super().__init__(message)


class StorageFailureError(FavoritesError):
    """Document store unreachable or write failed.

    The public message is always generic; the underlying cause is kept on
    ``__cause__`` and in the logs.
    """

    def __init__(self) -> None:
        super().__init__(GENERIC_ERROR_MESSAGE)


class UpstreamFailureError(FavoritesError):
    """Catalog API unreachable or returned an error."""

    def __init__(self) -> None:
        super().__init__(GENERIC_ERROR_MESSAGE)
