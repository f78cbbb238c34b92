"""Application errors.

Every failure raised by the services carries the HTTP status it maps to, so the
routes never translate exceptions themselves: the handler registered in
``backoffice.app`` renders any ``AppError`` as ``{"error": {...}}``.
"""
from typing import Optional


class AppError(Exception):
    """Base class for failures surfaced to API callers."""

    status_code: int = 500
    error_type: str = "app_error"

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(AppError):
    status_code = 404
    error_type = "not_found"


class AuthenticationError(AppError):
    status_code = 401
    error_type = "authentication_error"


class PermissionDeniedError(AppError):
    status_code = 403
    error_type = "permission_denied"


class CompetitionStateError(AppError):
    """Admin action not allowed for the competition's current status."""

    status_code = 400
    error_type = "invalid_status"


class LocationFormatError(AppError):
    """Stored geometry is not a ``POINT(lon lat)`` string (data integrity fault)."""

    status_code = 500
    error_type = "location_format_error"


class NoLocationError(AppError):
    status_code = 400
    error_type = "no_location"


class AlreadyFetchedError(AppError):
    status_code = 400
    error_type = "already_fetched"


class FutureDateError(AppError):
    status_code = 400
    error_type = "future_date"


class WeatherUnavailableError(AppError):
    status_code = 404
    error_type = "weather_unavailable"


class WeatherFetchError(AppError):
    """Upstream transport or response failure.

    ``cause`` keeps the original exception message.
    """

    status_code = 500
    error_type = "weather_fetch_error"

    def __init__(self, cause: str):
        super().__init__(f"Error fetching weather data: {cause}")
        self.cause = cause
