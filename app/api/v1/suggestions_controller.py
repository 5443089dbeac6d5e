# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, Query

# Local application imports
from ...application.dto.favorites_dto import CitySuggestionResponse, SuggestionsResponse
from ...application.use_cases.weather.suggest_cities import SuggestCitiesUseCase
from ...di.container import get_container


router = APIRouter(tags=["suggestions"])


@router.get("", response_model=SuggestionsResponse, response_model_exclude_none=True)
async def get_suggestions(q: Optional[str] = Query(None)) -> SuggestionsResponse:
    """
    City autocomplete

    Never fails: a missing query or a provider failure yields an empty list
    (the latter with an error message alongside).
    """
    if not q:
        return SuggestionsResponse()

    container = get_container()
    suggest_use_case = container.get(SuggestCitiesUseCase)
    result = await suggest_use_case.execute(q)

    if not result.ok:
        return SuggestionsResponse(suggestions=[], error=result.error.message)
    return SuggestionsResponse(
        suggestions=[CitySuggestionResponse.from_suggestion(s) for s in result.value]
    )
