from .auth_dto import LoginFormResponse, LoginErrors, LoginErrorResponse
from .user_dto import UserResponse
from .favorites_dto import (
    WeatherCardResponse,
    CityWeatherErrorResponse,
    FavoritesViewResponse,
    ErrorResponse,
    CitySuggestionResponse,
    SuggestionsResponse,
)

__all__ = [
    "LoginFormResponse",
    "LoginErrors",
    "LoginErrorResponse",
    "UserResponse",
    "WeatherCardResponse",
    "CityWeatherErrorResponse",
    "FavoritesViewResponse",
    "ErrorResponse",
    "CitySuggestionResponse",
    "SuggestionsResponse",
]
