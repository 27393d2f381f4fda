"""
Error kinds raised by the user validation rules and use cases.

Every error carries the user-facing message and the HTTP status it maps to.
The first failing check raises; nothing is retried.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class UserServiceError(Exception):
    """Base exception for all user service errors."""

    status_code: int = 400
    default_message: str = "Bad request"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# -----------------------------------------------------------------------------
# Validation (400)
# -----------------------------------------------------------------------------


class InvalidIdError(UserServiceError):
    """Raised when a user ID is missing, non-numeric or below 1."""
    default_message = "Invalid or missing ID"


class MissingFieldsError(UserServiceError):
    """Raised when required body fields are absent or empty."""
    default_message = "Missing field. Username, email and password are required."


class InvalidUsernameError(UserServiceError):
    """Raised when a trimmed username is out of length bounds."""
    default_message = "Username length must be between 3 and 32"


class UsernameTakenError(UserServiceError):
    """Raised when another user already has the username."""
    default_message = "Username already exists"


class InvalidEmailError(UserServiceError):
    """Raised when an email does not match the accepted format."""
    default_message = "Invalid email address"


class EmailTakenError(UserServiceError):
    """Raised when another user already has the email."""
    default_message = "Email already exists"


class WeakPasswordError(UserServiceError):
    """Raised when a password breaks the length or character rules."""
    default_message = (
        "Password must be in numerical and alphabetical characters, "
        "length must be between 2 and 32 characters"
    )


# -----------------------------------------------------------------------------
# Lookup (404)
# -----------------------------------------------------------------------------


class UserNotFoundError(UserServiceError):
    """Raised when no user has the ID, or login credentials match nobody."""
    status_code = 404
    default_message = "User not found"
