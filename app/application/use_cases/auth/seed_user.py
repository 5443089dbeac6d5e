# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....core.security import hash_password
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class SeedUserUseCase:
    """
    Use case for ensuring the bootstrap account exists.

    Idempotent: an existing account with the configured username is left
    untouched (its password and favorites are not reset).
    """

    def __init__(self, user_repository: UserRepository, username: str, password: str) -> None:
        self.user_repository = user_repository
        self.username = username
        self.password = password

    async def execute(self) -> UserResponse:
        """
        Create the bootstrap user unless it already exists

        Returns:
            UserResponse for the existing or newly created user
        """
        existing = await self.user_repository.find_by_username(self.username)
        if existing is not None:
            logger.info(f"User already exists: {existing.username}")
            user = existing
        else:
            logger.info(f"Creating bootstrap user: {self.username}")
            user = await self.user_repository.save(
                User(
                    id=None,  # Will be set by repository
                    username=self.username,
                    password_hash=hash_password(self.password),
                    favorites=[],
                )
            )
            logger.info(f"User created successfully: {user.username}")

        return UserResponse(
            id=user.id or "",
            username=user.username,
            favorites=list(user.favorites),
        )
