# Standard library imports
import os
from typing import Final, List, Optional


REQUIRED_ENV_VARS: Final[tuple] = ("WEATHER_API_KEY", "SESSION_SECRET", "MONGO_URI")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    The weather API key, session secret and MongoDB URI are required; the
    process fails fast with RuntimeError when any of them is missing.
    """

    def __init__(self) -> None:
        missing = [name for name in REQUIRED_ENV_VARS if not os.getenv(name)]
        if missing:
            raise RuntimeError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

        # Runtime environment
        self.environment: Final[str] = os.getenv("APP_ENV", "development")
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
            if origin.strip()
        ]

        # Database Configuration
        self.mongo_uri: Final[str] = os.environ["MONGO_URI"]
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "weather_app")

        # Session Configuration
        self.session_secret: Final[str] = os.environ["SESSION_SECRET"]
        self.session_algorithm: Final[str] = os.getenv("SESSION_ALGORITHM", "HS256")
        self.session_cookie_name: Final[str] = os.getenv("SESSION_COOKIE_NAME", "weather_app_session")
        self.session_max_age_days: Final[int] = int(os.getenv("SESSION_MAX_AGE_DAYS", "30"))

        # Weather provider Configuration
        self.weather_api_key: Final[str] = os.environ["WEATHER_API_KEY"]
        self.weather_api_base_url: Final[str] = os.getenv(
            "WEATHER_API_BASE_URL",
            "https://api.weatherapi.com/v1"
        )
        self.weather_api_timeout: Final[float] = float(os.getenv("WEATHER_API_TIMEOUT", "10"))

        # Bootstrap account
        self.seed_username: Final[str] = os.getenv("SEED_USERNAME", "ipgautomotive")
        self.seed_password: Final[str] = os.getenv("SEED_PASSWORD", "carmaker")

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def session_max_age_seconds(self) -> int:
        return self.session_max_age_days * 24 * 60 * 60


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values

    Raises:
        RuntimeError: If a required environment variable is missing
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
