"""
Shared pytest fixtures for weather favorites tests.
"""
import os
from typing import List, Optional
from unittest.mock import AsyncMock, MagicMock, patch

# Required settings must exist before app modules are imported
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")
os.environ.setdefault("SESSION_SECRET", "test-session-secret-for-unit-tests-only-0123456789")
os.environ.setdefault("WEATHER_API_KEY", "test-weather-api-key")

import pytest

from app.domain.models.user import User
from app.domain.models.weather import WeatherSnapshot


TEST_USER_ID = "64b7f0c2a1b2c3d4e5f60718"


def _make_user(
    favorites: Optional[List[str]] = None,
    user_id: str = TEST_USER_ID,
    username: str = "ipgautomotive",
    password_hash: str = "$2b$10$hashed",
) -> User:
    return User(
        id=user_id,
        username=username,
        password_hash=password_hash,
        favorites=list(favorites or []),
    )


def _make_snapshot(name: str = "Paris", country: str = "France") -> WeatherSnapshot:
    return WeatherSnapshot(
        name=name,
        region="Ile-de-France",
        country=country,
        temp_c=18.0,
        condition_text="Partly cloudy",
        condition_icon="https://cdn.weatherapi.com/weather/64x64/day/116.png",
        humidity=60,
        precip_mm=0.0,
    )


@pytest.fixture
def user_factory():
    """Builder for User domain objects."""
    return _make_user


@pytest.fixture
def snapshot_factory():
    """Builder for WeatherSnapshot objects."""
    return _make_snapshot


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_weather_db",
        "SESSION_SECRET": "test-session-secret-for-unit-tests-only-0123456789",
        "WEATHER_API_KEY": "test-weather-api-key",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for the security helpers."""
    mock = MagicMock()
    mock.session_secret = "test-session-secret-for-unit-tests-only-0123456789"
    mock.session_algorithm = "HS256"
    mock.session_max_age_seconds = 30 * 24 * 60 * 60
    mock.is_production = False

    with patch("app.core.config.get_settings", return_value=mock), patch(
        "app.core.security.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository whose save() echoes the user back."""
    repo = AsyncMock()
    repo.save.side_effect = lambda user: user
    return repo


@pytest.fixture
def mock_weather_client():
    """Mock WeatherApiClient that resolves every city."""
    client = AsyncMock()
    client.fetch_current.side_effect = lambda city: _make_snapshot(name=city)
    client.fetch_suggestions.return_value = []
    return client
