"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    USERNAME = "username"
    PASSWORD_HASH = "password_hash"
    PASSWORD_SALT = "password_salt"

    # MongoDB specific
    MONGO_ID = "_id"  # holds the integer sequence ID
