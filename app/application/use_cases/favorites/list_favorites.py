# Standard library imports
import asyncio
import logging
from typing import Union

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import CityNotFoundError, WeatherError
from ....infrastructure.external.weather_api_client import WeatherApiClient
from ...dto.favorites_dto import (
    CityWeatherErrorResponse,
    FavoritesViewResponse,
    WeatherCardResponse,
)
from .user_loader import load_session_user

logger = logging.getLogger(__name__)


class ListFavoritesWithWeatherUseCase:
    """
    Use case for building the authenticated view.

    Weather for every favorite is fetched concurrently. A failed lookup
    becomes a per-city error entry and never affects the other cities.
    Read-only: the stored list is never modified.
    """

    def __init__(self, user_repository: UserRepository, weather_client: WeatherApiClient) -> None:
        self.user_repository = user_repository
        self.weather_client = weather_client

    async def execute(self, user_id: str) -> FavoritesViewResponse:
        """
        Args:
            user_id: ID of the authenticated user

        Returns:
            FavoritesViewResponse with one weather entry per favorite, in order

        Raises:
            UserNotFoundError: If the session user no longer exists
        """
        user = await load_session_user(self.user_repository, user_id)

        weather = await asyncio.gather(
            *(self._weather_for(city) for city in user.favorites)
        )

        return FavoritesViewResponse(
            username=user.username,
            favorites=list(user.favorites),
            weather=list(weather),
        )

    async def _weather_for(self, city: str) -> Union[WeatherCardResponse, CityWeatherErrorResponse]:
        try:
            snapshot = await self.weather_client.fetch_current(city)
        except CityNotFoundError as e:
            return CityWeatherErrorResponse(city=city, error=e.message)
        except WeatherError as e:
            logger.warning(f"Weather lookup failed for '{city}': {e.message}")
            return CityWeatherErrorResponse(city=city, error=f"Failed to fetch weather for {city}")
        return WeatherCardResponse.from_snapshot(city, snapshot)
