from .auth import (
    LoginUserUseCase,
    SeedUserUseCase,
)
from .favorites import (
    AddCityUseCase,
    RemoveCityUseCase,
    ListFavoritesWithWeatherUseCase,
)
from .weather import SuggestCitiesUseCase

__all__ = [
    "LoginUserUseCase",
    "SeedUserUseCase",
    "AddCityUseCase",
    "RemoveCityUseCase",
    "ListFavoritesWithWeatherUseCase",
    "SuggestCitiesUseCase",
]
