from .add_city import AddCityUseCase
from .remove_city import RemoveCityUseCase
from .list_favorites import ListFavoritesWithWeatherUseCase

__all__ = [
    "AddCityUseCase",
    "RemoveCityUseCase",
    "ListFavoritesWithWeatherUseCase",
]
