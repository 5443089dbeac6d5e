# Standard library imports
import logging
import re
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"


def mask_mongo_uri(uri: str) -> str:
    """Hide credentials in a MongoDB URI before it is logged"""
    return re.sub(r"//[^:/@]+:[^@]+@", "//****:****@", uri)


class MongoConnection:
    """
    Owns the MongoDB client for the lifetime of the process.

    Created by the DI container and opened/closed by the application
    lifespan (or by scripts). Repositories receive collections from it
    instead of reaching for module-level state.
    """

    def __init__(self, mongo_uri: str, database_name: str) -> None:
        self.mongo_uri = mongo_uri
        self.database_name = database_name
        self._client: Optional[AsyncIOMotorClient] = None
        self._database: Optional[AsyncIOMotorDatabase] = None

    @property
    def is_open(self) -> bool:
        return self._client is not None

    def open(self) -> AsyncIOMotorDatabase:
        """
        Create the pooled client. Calling open() on an open connection
        returns the existing database handle.

        Returns:
            MongoDB database instance
        """
        if self.is_open:
            return self._database

        logger.info(f"Connecting to MongoDB at {mask_mongo_uri(self.mongo_uri)}")
        self._client = AsyncIOMotorClient(
            self.mongo_uri,
            serverSelectionTimeoutMS=30000,
            connectTimeoutMS=30000,
            socketTimeoutMS=45000,
            maxPoolSize=10,
        )
        self._database = self._client[self.database_name]
        return self._database

    def close(self) -> None:
        """Close the client; safe to call when already closed"""
        if self.is_open:
            self._client.close()
            logger.info("MongoDB connection closed")
        self._client = None
        self._database = None

    def get_database(self) -> AsyncIOMotorDatabase:
        """
        Get the database handle

        Raises:
            RuntimeError: If the connection has not been opened
        """
        if self._database is None:
            raise RuntimeError("MongoDB connection is not open")
        return self._database

    def get_user_collection(self) -> AsyncIOMotorCollection:
        """
        Get users collection from MongoDB

        Returns:
            MongoDB collection for users
        """
        return self.get_database()[USERS_COLLECTION]
