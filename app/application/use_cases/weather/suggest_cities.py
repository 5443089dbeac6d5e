# Standard library imports
import logging
from typing import List

# Local application imports
from ....domain.models.weather import CitySuggestion
from ....domain.exceptions import WeatherError, WeatherErrorKind
from ....infrastructure.external.weather_api_client import WeatherApiClient
from ...results import Result

logger = logging.getLogger(__name__)


class SuggestCitiesUseCase:
    """Use case for city-name autocomplete"""

    def __init__(self, weather_client: WeatherApiClient) -> None:
        self.weather_client = weather_client

    async def execute(self, query: str) -> Result[List[CitySuggestion]]:
        """
        Args:
            query: Prefix typed by the user; under two characters yields an
                empty list without a provider call

        Returns:
            Result carrying the suggestions, or PROVIDER_UNAVAILABLE
        """
        try:
            suggestions = await self.weather_client.fetch_suggestions(query)
        except WeatherError as e:
            logger.warning(f"City suggestions failed for '{query}': {e.message}")
            return Result.failure(WeatherErrorKind.PROVIDER_UNAVAILABLE, "Failed to fetch suggestions")
        return Result.success(suggestions)
