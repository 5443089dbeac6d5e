from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.favorites.add_city import AddCityUseCase
from ...application.use_cases.favorites.remove_city import RemoveCityUseCase
from ...application.use_cases.favorites.list_favorites import ListFavoritesWithWeatherUseCase
from ...application.use_cases.weather.suggest_cities import SuggestCitiesUseCase
from ...infrastructure.external.weather_api_client import WeatherApiClient

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class FavoritesProvider:
    """Favorites use case provider - registers favorites and suggestion use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            AddCityUseCase,
            lambda: AddCityUseCase(
                user_repository=container.get(UserRepository),
                weather_client=container.get(WeatherApiClient)
            )
        )
        
        container.register_factory(
            RemoveCityUseCase,
            lambda: RemoveCityUseCase(
                user_repository=container.get(UserRepository)
            )
        )
        
        container.register_factory(
            ListFavoritesWithWeatherUseCase,
            lambda: ListFavoritesWithWeatherUseCase(
                user_repository=container.get(UserRepository),
                weather_client=container.get(WeatherApiClient)
            )
        )
        
        container.register_factory(
            SuggestCitiesUseCase,
            lambda: SuggestCitiesUseCase(
                weather_client=container.get(WeatherApiClient)
            )
        )
