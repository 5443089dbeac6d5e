# Standard library imports
from dataclasses import dataclass


@dataclass(frozen=True)
class WeatherSnapshot:
    """
    Current conditions for one city, as reported by the weather provider.

    Produced per request and never persisted or cached.
    """
    name: str
    region: str
    country: str
    temp_c: float
    condition_text: str
    condition_icon: str
    humidity: int
    precip_mm: float


@dataclass(frozen=True)
class CitySuggestion:
    """Autocomplete candidate for the city search box"""
    name: str
    region: str
    country: str

    @property
    def id(self) -> str:
        """Identifier used by the client to de-duplicate suggestions"""
        return f"{self.name}-{self.country}"
