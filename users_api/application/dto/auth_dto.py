from typing import Optional

from pydantic import BaseModel

from .user_dto import UserEnvelope


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    username: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(UserEnvelope):
    """DTO for login response with opaque session token"""
    token: str
