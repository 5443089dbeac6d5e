# Standard library imports
import logging
from typing import List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import MAX_FAVORITE_CITIES
from ....domain.exceptions import (
    CityNotFoundError,
    StoreErrorKind,
    ValidationErrorKind,
    WeatherError,
    WeatherErrorKind,
)
from ....infrastructure.external.weather_api_client import WeatherApiClient
from ...results import Result
from .user_loader import load_session_user

logger = logging.getLogger(__name__)

ADD_FAILED_MESSAGE = "Failed to add city"


class AddCityUseCase:
    """
    Use case for adding a city to the user's favorites.

    Rules, checked in order; any failure leaves the stored list untouched:
    1. the trimmed name must not be blank
    2. the weather provider must resolve the city
    3. the list must hold fewer than MAX_FAVORITE_CITIES entries
    4. the city must not already be present (trim + case-insensitive)
    The trimmed name is appended with its original casing.
    """

    def __init__(self, user_repository: UserRepository, weather_client: WeatherApiClient) -> None:
        self.user_repository = user_repository
        self.weather_client = weather_client

    async def execute(self, user_id: str, raw_city: str) -> Result[List[str]]:
        """
        Add a city to favorites

        Args:
            user_id: ID of the authenticated user
            raw_city: City name as submitted by the user

        Returns:
            Result carrying the updated favorites list, or an error kind

        Raises:
            UserNotFoundError: If the session user no longer exists
        """
        city = (raw_city or "").strip()
        if not city:
            return Result.failure(ValidationErrorKind.BLANK_CITY, "City name is required")

        try:
            await self.weather_client.fetch_current(city)
        except CityNotFoundError as e:
            return Result.failure(WeatherErrorKind.CITY_NOT_FOUND, e.message)
        except WeatherError as e:
            logger.warning(f"Could not verify city '{city}' for user {user_id}: {e.message}")
            return Result.failure(WeatherErrorKind.PROVIDER_UNAVAILABLE, ADD_FAILED_MESSAGE)

        try:
            user = await load_session_user(self.user_repository, user_id)
        except RuntimeError as e:
            logger.error(f"Could not load favorites of user {user_id}: {e}", exc_info=True)
            return Result.failure(StoreErrorKind.UNAVAILABLE, ADD_FAILED_MESSAGE)

        if len(user.favorites) >= MAX_FAVORITE_CITIES:
            return Result.failure(
                ValidationErrorKind.FAVORITES_LIMIT_EXCEEDED,
                f"Maximum {MAX_FAVORITE_CITIES} cities allowed",
            )

        if user.has_favorite(city):
            return Result.failure(ValidationErrorKind.DUPLICATE_CITY, "City already in favorites")

        user.favorites = [*user.favorites, city]
        try:
            saved_user = await self.user_repository.save(user)
        except RuntimeError as e:
            logger.error(f"Could not save favorites of user {user_id}: {e}", exc_info=True)
            return Result.failure(StoreErrorKind.UNAVAILABLE, ADD_FAILED_MESSAGE)
        logger.info(f"Added '{city}' to favorites of user {user_id}")
        return Result.success(list(saved_user.favorites))
