"""Constants for User model field names and limits"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    USERNAME = "username"
    EMAIL = "email"
    PASSWORD = "password"

    # Fields a client may write, in validation order
    WRITABLE = (USERNAME, EMAIL, PASSWORD)


class UserLimits:
    """Length bounds applied by the validator (inclusive)"""
    USERNAME_MIN_LENGTH = 3
    USERNAME_MAX_LENGTH = 32
    PASSWORD_MIN_LENGTH = 2
    PASSWORD_MAX_LENGTH = 32
