from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import MongoConnection

if TYPE_CHECKING:
    from ..container import DIContainer


class DatabaseProvider:
    """Database connection provider - single source of truth for the MongoDB connection"""
    
    @staticmethod
    def register(container: "DIContainer") -> None:
        """
        Register the MongoDB connection as a singleton.
        The connection is created closed; the container opens it on startup.
        """
        settings = container.settings
        container.register_singleton(
            MongoConnection,
            MongoConnection(
                mongo_uri=settings.mongo_uri,
                database_name=settings.mongo_database_name,
            )
        )
