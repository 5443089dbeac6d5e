# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# External package imports
import httpx

# Local application imports
from ...domain.models.weather import CitySuggestion, WeatherSnapshot
from ...domain.exceptions import CityNotFoundError, ProviderUnavailableError

logger = logging.getLogger(__name__)

# Provider error code for "No matching location found"
NO_MATCHING_LOCATION_CODE = 1006

MIN_SUGGESTION_QUERY_LENGTH = 2


class WeatherApiClient:
    """
    HTTP client for the weatherapi.com current-conditions and search endpoints.

    Translates provider responses into domain objects. Every failure surfaces
    as CityNotFoundError (the provider has no such location) or
    ProviderUnavailableError (anything else); nothing is retried or cached.
    """

    def __init__(self, http_client: httpx.AsyncClient, api_key: str, base_url: str) -> None:
        self.http_client = http_client
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

    async def fetch_current(self, city: str) -> WeatherSnapshot:
        """
        Fetch current weather for a city.

        Args:
            city: Free-text city name

        Returns:
            WeatherSnapshot for the resolved location

        Raises:
            CityNotFoundError: If the provider reports no matching location
            ProviderUnavailableError: On any other failure
        """
        response = await self._get(
            "current.json",
            {"key": self.api_key, "q": city, "aqi": "no"},
        )

        if response.status_code != 200:
            if self._is_not_found(response):
                logger.info(f"Weather provider has no location matching '{city}'")
                raise CityNotFoundError(city)
            logger.warning(
                f"Weather provider returned {response.status_code} for current weather of '{city}'"
            )
            raise ProviderUnavailableError(
                "Failed to fetch weather data", status_code=response.status_code
            )

        try:
            return self._to_snapshot(response.json())
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning(f"Malformed current weather payload for '{city}': {e}")
            raise ProviderUnavailableError("Failed to fetch weather data")

    async def fetch_suggestions(self, query: str) -> List[CitySuggestion]:
        """
        Fetch city autocomplete suggestions.

        Queries shorter than two characters return an empty list without
        calling the provider.

        Args:
            query: Prefix typed by the user

        Returns:
            List of CitySuggestion, possibly empty

        Raises:
            ProviderUnavailableError: On non-success responses or malformed payloads
        """
        query = (query or "").strip()
        if len(query) < MIN_SUGGESTION_QUERY_LENGTH:
            return []

        response = await self._get("search.json", {"key": self.api_key, "q": query})
        if response.status_code != 200:
            logger.warning(
                f"Weather provider returned {response.status_code} for suggestions '{query}'"
            )
            raise ProviderUnavailableError(
                "Failed to fetch city suggestions", status_code=response.status_code
            )

        try:
            payload = response.json()
        except ValueError:
            raise ProviderUnavailableError("Failed to fetch city suggestions")
        if not isinstance(payload, list):
            raise ProviderUnavailableError("Failed to fetch city suggestions")

        suggestions = []
        for entry in payload:
            suggestion = self._to_suggestion(entry)
            if suggestion is None:
                logger.debug(f"Skipping malformed suggestion entry: {entry!r}")
                continue
            suggestions.append(suggestion)
        return suggestions

    async def _get(self, endpoint: str, params: Dict[str, str]) -> httpx.Response:
        try:
            return await self.http_client.get(f"{self.base_url}/{endpoint}", params=params)
        except httpx.TimeoutException:
            logger.error(f"Timeout calling weather provider endpoint {endpoint}")
            raise ProviderUnavailableError("Weather provider timed out")
        except httpx.HTTPError as e:
            logger.error(f"Transport error calling weather provider endpoint {endpoint}: {e}")
            raise ProviderUnavailableError("Weather provider unreachable")

    @staticmethod
    def _is_not_found(response: httpx.Response) -> bool:
        if response.status_code == 404:
            return True
        if response.status_code != 400:
            return False
        try:
            payload = response.json()
        except ValueError:
            return False
        error = payload.get("error") if isinstance(payload, dict) else None
        if not isinstance(error, dict):
            return False
        return error.get("code") == NO_MATCHING_LOCATION_CODE

    @staticmethod
    def _to_snapshot(payload: Dict[str, Any]) -> WeatherSnapshot:
        location = payload["location"]
        current = payload["current"]
        condition = current.get("condition")
        if not isinstance(condition, dict):
            condition = {}

        icon = condition.get("icon")
        if not isinstance(icon, str):
            icon = ""
        elif icon.startswith("//"):
            icon = f"https:{icon}"

        return WeatherSnapshot(
            name=location["name"],
            region=location.get("region", ""),
            country=location.get("country", ""),
            temp_c=float(current["temp_c"]),
            condition_text=condition.get("text", ""),
            condition_icon=icon,
            humidity=int(current.get("humidity", 0)),
            precip_mm=float(current.get("precip_mm", 0.0)),
        )

    @staticmethod
    def _to_suggestion(entry: Any) -> Optional[CitySuggestion]:
        if not isinstance(entry, dict):
            return None
        name = entry.get("name")
        country = entry.get("country")
        if not name or not country:
            return None
        return CitySuggestion(name=name, region=entry.get("region") or "", country=country)
