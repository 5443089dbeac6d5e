# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: AsyncIOMotorCollection) -> None:
        self.user_collection = user_collection

    async def ensure_indexes(self) -> None:
        """Create the unique username index (idempotent)"""
        try:
            await self.user_collection.create_index(UserFields.USERNAME, unique=True)
        except PyMongoError as e:
            raise RuntimeError(f"Error creating user indexes: {str(e)}")

    async def find_by_username(self, username: str) -> Optional[User]:
        """
        Find user by exact username

        Args:
            username: Username to search for (case-sensitive)

        Returns:
            User domain model if found, None otherwise
        """
        if not username:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.USERNAME: username})
        except PyMongoError as e:
            raise RuntimeError(f"Error finding user by username: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise (including malformed IDs)
        """
        if not user_id:
            return None

        try:
            object_id = ObjectId(user_id)
        except (InvalidId, ValueError, TypeError):
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)

    async def save(self, user: User) -> User:
        """
        Save user (create new or overwrite existing)

        Existing users are written with a full $set of their fields; there is
        no version check, so the last writer wins.

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with ID set
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = self._user_to_dict(user)

        try:
            if user.id:
                try:
                    object_id = ObjectId(user.id)
                except (InvalidId, ValueError, TypeError):
                    raise ValueError(f"Invalid user ID format: {user.id}")

                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": user_dict}
                )
                if update_result.matched_count == 0:
                    raise ValueError(f"User with ID {user.id} not found")

                return User(
                    id=user.id,
                    username=user.username,
                    password_hash=user.password_hash,
                    favorites=list(user.favorites),
                )

            result = await self.user_collection.insert_one(user_dict)
            new_document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
            if new_document is None:
                raise RuntimeError("User was created but could not be retrieved")

            return self._document_to_user(new_document)
        except PyMongoError as e:
            raise RuntimeError(f"Error saving user: {str(e)}")

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            username=document.get(UserFields.USERNAME, ""),
            password_hash=document.get(UserFields.PASSWORD_HASH, ""),
            favorites=list(document.get(UserFields.FAVORITES) or []),
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document (without _id)

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            UserFields.USERNAME: user.username,
            UserFields.PASSWORD_HASH: user.password_hash,
            UserFields.FAVORITES: list(user.favorites),
        }
