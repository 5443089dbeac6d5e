"""
Error taxonomy for the weather favorites application.

Expected failures are described by the ``*ErrorKind`` enums and travel inside
``Result`` objects. The exception classes below are raised by collaborators
(weather client, session layer) and by invariant violations; use cases catch
the former at their boundary and convert them to error kinds.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from enum import Enum
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Error kinds
# -----------------------------------------------------------------------------


class AuthErrorKind(str, Enum):
    USERNAME_NOT_FOUND = "username_not_found"
    INVALID_PASSWORD = "invalid_password"
    UNKNOWN = "unknown"


class ValidationErrorKind(str, Enum):
    BLANK_CITY = "blank_city"
    DUPLICATE_CITY = "duplicate_city"
    FAVORITES_LIMIT_EXCEEDED = "favorites_limit_exceeded"


class WeatherErrorKind(str, Enum):
    CITY_NOT_FOUND = "city_not_found"
    PROVIDER_UNAVAILABLE = "provider_unavailable"


class StoreErrorKind(str, Enum):
    UNAVAILABLE = "store_unavailable"


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class WeatherAppError(Exception):
    """Base exception for all application errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or "An error occurred. Please try again."
        self.details = details or {}


# -----------------------------------------------------------------------------
# Weather provider
# -----------------------------------------------------------------------------


class WeatherError(WeatherAppError):
    """Base exception for weather provider failures."""

    kind: WeatherErrorKind = WeatherErrorKind.PROVIDER_UNAVAILABLE


class CityNotFoundError(WeatherError):
    """Raised when the provider reports no location matching the query."""

    kind = WeatherErrorKind.CITY_NOT_FOUND

    def __init__(self, city: str):
        message = f'City "{city}" not found'
        super().__init__(message, user_message=message, details={"city": city})
        self.city = city


class ProviderUnavailableError(WeatherError):
    """Raised for non-success responses, transport failures and malformed payloads."""

    kind = WeatherErrorKind.PROVIDER_UNAVAILABLE

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(
            message,
            user_message="Failed to fetch weather data",
            details={"status_code": status_code},
        )
        self.status_code = status_code


# -----------------------------------------------------------------------------
# Users and sessions
# -----------------------------------------------------------------------------


class UserNotFoundError(WeatherAppError):
    """Raised when a valid session points at a user record that does not exist."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User {user_id} not found",
            user_message="Internal server error",
            details={"user_id": user_id},
        )
        self.user_id = user_id


class SessionRequiredError(WeatherAppError):
    """Raised when a request needs a session and has none; carries the return path."""

    def __init__(self, redirect_to: str):
        super().__init__(
            "Authentication required",
            user_message="Please sign in",
            details={"redirect_to": redirect_to},
        )
        self.redirect_to = redirect_to
