from .auth_dto import UserLoginRequest, LoginResponse
from .user_dto import (
    UserCreateRequest,
    UserUpdateRequest,
    UserPatchRequest,
    UserResponse,
    UserEnvelope,
    MessageResponse,
    to_user_response,
)

__all__ = [
    "UserLoginRequest",
    "LoginResponse",
    "UserCreateRequest",
    "UserUpdateRequest",
    "UserPatchRequest",
    "UserResponse",
    "UserEnvelope",
    "MessageResponse",
    "to_user_response",
]
