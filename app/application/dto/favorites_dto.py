# Standard library imports
from typing import List, Optional, Union

# External package imports
from pydantic import BaseModel, Field

# Local application imports
from ...domain.models.weather import CitySuggestion, WeatherSnapshot


class WeatherCardResponse(BaseModel):
    """Current weather for one favorite city"""
    city: str
    name: str
    region: str
    country: str
    temp_c: float
    condition_text: str
    condition_icon: str
    humidity: int
    precip_mm: float

    @classmethod
    def from_snapshot(cls, city: str, snapshot: WeatherSnapshot) -> "WeatherCardResponse":
        return cls(
            city=city,
            name=snapshot.name,
            region=snapshot.region,
            country=snapshot.country,
            temp_c=snapshot.temp_c,
            condition_text=snapshot.condition_text,
            condition_icon=snapshot.condition_icon,
            humidity=snapshot.humidity,
            precip_mm=snapshot.precip_mm,
        )


class CityWeatherErrorResponse(BaseModel):
    """Per-city lookup failure; other cities are unaffected"""
    city: str
    error: str


class FavoritesViewResponse(BaseModel):
    """DTO for the authenticated view: favorites plus one weather slot per city"""
    username: str
    favorites: List[str] = Field(default_factory=list)
    weather: List[Union[WeatherCardResponse, CityWeatherErrorResponse]] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """DTO for a rejected form submission"""
    error: str


class CitySuggestionResponse(BaseModel):
    id: str
    name: str
    region: str
    country: str

    @classmethod
    def from_suggestion(cls, suggestion: CitySuggestion) -> "CitySuggestionResponse":
        return cls(
            id=suggestion.id,
            name=suggestion.name,
            region=suggestion.region,
            country=suggestion.country,
        )


class SuggestionsResponse(BaseModel):
    suggestions: List[CitySuggestionResponse] = Field(default_factory=list)
    error: Optional[str] = None
