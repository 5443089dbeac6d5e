from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .weather_provider import WeatherProvider
from .auth_provider import AuthProvider
from .favorites_provider import FavoritesProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "WeatherProvider",
    "AuthProvider",
    "FavoritesProvider",
]
