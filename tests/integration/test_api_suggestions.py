"""
Integration tests for GET /api/suggestions.
"""
import pytest

pytestmark = pytest.mark.integration

from app.application.results import Result
from app.application.use_cases.weather.suggest_cities import SuggestCitiesUseCase
from app.domain.exceptions import WeatherErrorKind
from app.domain.models.weather import CitySuggestion


class TestSuggestionsAPI:
    """Tests for /api/suggestions"""

    def test_missing_query_returns_empty_list(self, client, use_cases):
        response = client.get("/api/suggestions")

        assert response.status_code == 200
        assert response.json() == {"suggestions": []}
        use_cases[SuggestCitiesUseCase].execute.assert_not_called()

    def test_returns_suggestions(self, client, use_cases):
        use_cases[SuggestCitiesUseCase].execute.return_value = Result.success(
            [CitySuggestion(name="Amsterdam", region="North Holland", country="Netherlands")]
        )

        response = client.get("/api/suggestions", params={"q": "am"})

        assert response.status_code == 200
        assert response.json() == {
            "suggestions": [
                {
                    "id": "Amsterdam-Netherlands",
                    "name": "Amsterdam",
                    "region": "North Holland",
                    "country": "Netherlands",
                }
            ]
        }
        use_cases[SuggestCitiesUseCase].execute.assert_awaited_once_with("am")

    def test_provider_failure_returns_empty_list(self, client, use_cases):
        use_cases[SuggestCitiesUseCase].execute.return_value = Result.failure(
            WeatherErrorKind.PROVIDER_UNAVAILABLE, "Failed to fetch suggestions"
        )

        response = client.get("/api/suggestions", params={"q": "am"})

        assert response.status_code == 200
        assert response.json() == {"suggestions": [], "error": "Failed to fetch suggestions"}
