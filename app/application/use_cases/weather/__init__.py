from .suggest_cities import SuggestCitiesUseCase

__all__ = ["SuggestCitiesUseCase"]
