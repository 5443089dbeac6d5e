"""External service clients for communicating with external systems"""

from .weather_api_client import WeatherApiClient

__all__ = [
    "WeatherApiClient",
]
