"""
Fixtures for API integration tests: a TestClient wired to a mocked DI container.
"""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from app.application.use_cases.auth.login_user import LoginUserUseCase
from app.application.use_cases.favorites.add_city import AddCityUseCase
from app.application.use_cases.favorites.list_favorites import ListFavoritesWithWeatherUseCase
from app.application.use_cases.favorites.remove_city import RemoveCityUseCase
from app.application.use_cases.weather.suggest_cities import SuggestCitiesUseCase
from app.core.security import create_session_token
from app.core.session import SessionCookieManager


SESSION_COOKIE = "weather_app_session"
USER_ID = "64b7f0c2a1b2c3d4e5f60718"


@pytest.fixture
def use_cases():
    return {
        LoginUserUseCase: AsyncMock(spec=LoginUserUseCase),
        AddCityUseCase: AsyncMock(spec=AddCityUseCase),
        RemoveCityUseCase: AsyncMock(spec=RemoveCityUseCase),
        ListFavoritesWithWeatherUseCase: AsyncMock(spec=ListFavoritesWithWeatherUseCase),
        SuggestCitiesUseCase: AsyncMock(spec=SuggestCitiesUseCase),
    }


@pytest.fixture
def mock_container(use_cases):
    registry = {
        **use_cases,
        SessionCookieManager: SessionCookieManager(
            cookie_name=SESSION_COOKIE,
            max_age_seconds=30 * 24 * 60 * 60,
            secure=False,
        ),
    }
    container = MagicMock()
    container.startup = AsyncMock()
    container.shutdown = AsyncMock()
    container.get.side_effect = lambda key: registry.get(key)
    return container


@pytest.fixture
def client(mock_container):
    """Create test client with mocked container (no real DB or weather provider)."""
    from app.main import app

    with patch("app.di.container._container", mock_container):
        with TestClient(app) as c:
            yield c


@pytest.fixture
def auth_client(client):
    """Test client carrying a valid session cookie for USER_ID."""
    client.cookies.set(SESSION_COOKIE, create_session_token(USER_ID))
    return client
