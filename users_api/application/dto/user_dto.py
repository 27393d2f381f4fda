from typing import Optional

from pydantic import BaseModel

from ...domain.models.user import User


class UserFieldsRequest(BaseModel):
    """
    Body fields a client may send for a user.

    Every field is optional here: absent and empty values are both treated as
    missing by the validator, which decides what each operation requires.
    """
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UserCreateRequest(UserFieldsRequest):
    """DTO for user creation request (all fields required)"""


class UserUpdateRequest(UserFieldsRequest):
    """DTO for full user update request (all fields required)"""


class UserPatchRequest(UserFieldsRequest):
    """DTO for partial user update request (at least one field)"""


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: int
    username: str
    email: str


class MessageResponse(BaseModel):
    message: str


class UserEnvelope(MessageResponse):
    """DTO wrapping a single user with a status message"""
    user: UserResponse


def to_user_response(user: User) -> UserResponse:
    """Public view of a user: everything except the password"""
    return UserResponse(
        id=user.id,
        username=user.username,
        email=user.email,
    )
