from .user_validator import (
    UserValidator,
    is_supplied,
    parse_user_id,
    check_username_length,
    normalize_username,
    is_valid_email,
    is_valid_password,
)

__all__ = [
    "UserValidator",
    "is_supplied",
    "parse_user_id",
    "check_username_length",
    "normalize_username",
    "is_valid_email",
    "is_valid_password",
]
