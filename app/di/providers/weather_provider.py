from typing import TYPE_CHECKING
from ...infrastructure.external.weather_api_client import WeatherApiClient
from ...infrastructure.http_client_factory import create_http_client

if TYPE_CHECKING:
    from ..container import DIContainer


HTTP_CLIENT_KEY = "http_client"


class WeatherProvider:
    """Weather client provider - one pooled HTTP client shared by all weather calls"""
    
    @staticmethod
    def register(container: "DIContainer") -> None:
        settings = container.settings
        http_client = create_http_client(timeout=settings.weather_api_timeout)
        container.register_singleton(HTTP_CLIENT_KEY, http_client)
        
        container.register_singleton(
            WeatherApiClient,
            WeatherApiClient(
                http_client=http_client,
                api_key=settings.weather_api_key,
                base_url=settings.weather_api_base_url,
            )
        )
