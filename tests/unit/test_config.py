"""
Unit tests for app.core.config
"""
import os
from unittest.mock import patch

import pytest
from app.core.config import Settings


REQUIRED = {
    "MONGO_URI": "mongodb://db:27017",
    "SESSION_SECRET": "secret-value",
    "WEATHER_API_KEY": "api-key",
}


class TestSettings:
    """Tests for Settings"""

    def test_required_values_are_read(self):
        with patch.dict(os.environ, REQUIRED, clear=True):
            settings = Settings()
        assert settings.mongo_uri == "mongodb://db:27017"
        assert settings.session_secret == "secret-value"
        assert settings.weather_api_key == "api-key"

    def test_defaults(self):
        with patch.dict(os.environ, REQUIRED, clear=True):
            settings = Settings()
        assert settings.session_cookie_name == "weather_app_session"
        assert settings.session_max_age_seconds == 30 * 24 * 60 * 60
        assert settings.weather_api_base_url == "https://api.weatherapi.com/v1"
        assert settings.is_production is False

    @pytest.mark.parametrize("missing", sorted(REQUIRED))
    def test_missing_required_value_fails_fast(self, missing):
        env = {k: v for k, v in REQUIRED.items() if k != missing}
        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(RuntimeError, match=missing):
                Settings()

    def test_all_missing_values_are_reported(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(RuntimeError) as exc_info:
                Settings()
        message = str(exc_info.value)
        for name in REQUIRED:
            assert name in message

    def test_production_environment(self):
        with patch.dict(os.environ, {**REQUIRED, "APP_ENV": "production"}, clear=True):
            settings = Settings()
        assert settings.is_production is True

    def test_cors_origins_are_split(self):
        env = {**REQUIRED, "CORS_ORIGINS": "http://a.test, http://b.test,"}
        with patch.dict(os.environ, env, clear=True):
            settings = Settings()
        assert settings.cors_origins == ["http://a.test", "http://b.test"]
