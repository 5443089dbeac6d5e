# Standard library imports
import logging
from typing import Optional

# Local application imports
from ..core.config import Settings, get_settings
from ..infrastructure.db.mongo_connection import MongoConnection
from ..infrastructure.http_client_factory import close_http_client
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    DatabaseProvider,
    FavoritesProvider,
    RepositoryProvider,
    WeatherProvider,
)
from .providers.weather_provider import HTTP_CLIENT_KEY

logger = logging.getLogger(__name__)


class DIContainer(BaseContainer):
    """
    Main dependency injection container and composition root.
    Composes all providers in the correct order and owns the lifecycle of
    the MongoDB connection and the pooled HTTP client.

    Registration order is important:
    1. Database connection (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Weather client (WeatherProvider)
    4. Use cases (AuthProvider, FavoritesProvider) - depend on the above
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → clients → use cases
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        WeatherProvider.register(self)
        AuthProvider.register(self)
        FavoritesProvider.register(self)

    async def startup(self) -> None:
        """Open external resources (call once, from the application lifespan)"""
        self.get(MongoConnection).open()
        logger.info("Container resources opened")

    async def shutdown(self) -> None:
        """Release external resources"""
        await close_http_client(self.get(HTTP_CLIENT_KEY))
        self.get(MongoConnection).close()
        logger.info("Container resources closed")


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container
