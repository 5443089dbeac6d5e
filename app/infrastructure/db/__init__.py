from .mongo_connection import MongoConnection, mask_mongo_uri
from .mongo_user_repository import MongoUserRepository

__all__ = [
    "MongoConnection",
    "mask_mongo_uri",
    "MongoUserRepository",
]
