# Standard library imports
import logging
from typing import List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import StoreErrorKind
from ....domain.models.user import normalize_city_name
from ...results import Result
from .user_loader import load_session_user

logger = logging.getLogger(__name__)

REMOVE_FAILED_MESSAGE = "Failed to remove city"


class RemoveCityUseCase:
    """Use case for removing a city from favorites (idempotent)"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str, city: str) -> Result[List[str]]:
        """
        Drop every favorite matching the city under trim + case-insensitive
        comparison. Removing a city that is not a favorite succeeds and
        changes nothing.

        Returns:
            Result carrying the updated favorites list, or a store failure

        Raises:
            UserNotFoundError: If the session user no longer exists
        """
        target = normalize_city_name(city)
        try:
            user = await load_session_user(self.user_repository, user_id)
        except RuntimeError as e:
            logger.error(f"Could not load favorites of user {user_id}: {e}", exc_info=True)
            return Result.failure(StoreErrorKind.UNAVAILABLE, REMOVE_FAILED_MESSAGE)

        remaining = [
            existing for existing in user.favorites
            if normalize_city_name(existing) != target
        ]
        if len(remaining) == len(user.favorites):
            logger.debug(f"'{city.strip()}' is not a favorite of user {user_id}; nothing to remove")
            return Result.success(list(user.favorites))

        user.favorites = remaining
        try:
            saved_user = await self.user_repository.save(user)
        except RuntimeError as e:
            logger.error(f"Could not save favorites of user {user_id}: {e}", exc_info=True)
            return Result.failure(StoreErrorKind.UNAVAILABLE, REMOVE_FAILED_MESSAGE)

        logger.info(f"Removed '{city.strip()}' from favorites of user {user_id}")
        return Result.success(list(saved_user.favorites))
