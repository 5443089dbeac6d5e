from .user import User, normalize_city_name
from .weather import WeatherSnapshot, CitySuggestion

__all__ = ["User", "normalize_city_name", "WeatherSnapshot", "CitySuggestion"]
