"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    USERNAME = "username"
    PASSWORD_HASH = "passwordHash"
    FAVORITES = "favorites"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
