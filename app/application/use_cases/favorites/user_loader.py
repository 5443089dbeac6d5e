# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import UserNotFoundError


async def load_session_user(user_repository: UserRepository, user_id: str) -> User:
    """
    Load the user bound to an authenticated session.

    Raises:
        UserNotFoundError: The session is valid but the record is gone; this
            is an invariant violation and is not recovered from
    """
    user = await user_repository.find_by_id(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user
