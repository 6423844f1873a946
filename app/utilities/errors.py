from fastapi import HTTPException, status


class RatingError(Exception):
    """Base class for errors raised by the ratings service."""

    def __init__(self, message: str = "", details: str = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(RatingError):
    """A rating document violates the field constraints."""

    def __init__(self, details: str = None):
        super().__init__("Validation error", details)


class NotFound(RatingError):
    def __init__(self, rating_id: str = None):
        super().__init__("Rating not found", rating_id)


class StoreError(RatingError):
    """Connectivity or unexpected persistence failure."""


class StartupFailure(RatingError):
    """The store could not be reached when the application booted."""


class BodyTooLarge(HTTPException):
    """413 - request body is over the configured limit"""

    def __init__(self):
        super().__init__(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail="Request body too large")
