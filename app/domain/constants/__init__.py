"""Constants for domain model field names"""

from .user_fields import UserFields
from .favorites import MAX_FAVORITE_CITIES

__all__ = [
    "UserFields",
    "MAX_FAVORITE_CITIES",
]
