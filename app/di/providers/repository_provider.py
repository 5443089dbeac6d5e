from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.db.mongo_connection import MongoConnection
from ...infrastructure.db.mongo_user_repository import MongoUserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register repository implementations.
        Repositories are built on demand because the collection is only
        available once the connection has been opened.
        """
        container.register_factory(
            UserRepository,
            lambda: MongoUserRepository(
                user_collection=container.get(MongoConnection).get_user_collection()
            )
        )
