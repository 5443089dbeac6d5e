"""
Smoke test - verifies the application can be assembled.
Run: pytest tests/test_smoke.py -v
"""


def test_settings_load_from_environment():
    """Required settings are present in the test environment."""
    from app.core.config import get_settings

    settings = get_settings()
    assert settings.mongo_uri
    assert settings.weather_api_key
    assert settings.session_cookie_name == "weather_app_session"


def test_application_registers_routes():
    """The FastAPI app exposes the login, favorites and suggestions routes."""
    from app.main import app

    paths = set(app.openapi()["paths"])
    assert {"/login", "/", "/api/suggestions"} <= paths
