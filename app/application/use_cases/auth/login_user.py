# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import AuthErrorKind
from ....core.security import verify_password
from ...results import Result

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for checking a username/password pair against the stored hash"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, username: str, password: str) -> Result[User]:
        """
        Authenticate a user

        Args:
            username: Exact (case-sensitive) username
            password: Plain text password

        Returns:
            Result carrying the User on success, or one of
            USERNAME_NOT_FOUND, INVALID_PASSWORD, UNKNOWN
        """
        try:
            user = await self.user_repository.find_by_username(username)
        except RuntimeError:
            logger.error(f"Login failed for '{username}' due to an unexpected error", exc_info=True)
            return Result.failure(AuthErrorKind.UNKNOWN, "An unexpected error occurred")

        if user is None:
            logger.info(f"Login rejected: username '{username}' not found")
            return Result.failure(AuthErrorKind.USERNAME_NOT_FOUND, "Username not found")

        if not verify_password(password, user.password_hash):
            logger.info(f"Login rejected: invalid password for '{username}'")
            return Result.failure(AuthErrorKind.INVALID_PASSWORD, "Invalid password")

        logger.info(f"Login successful for '{username}'")
        return Result.success(user)
