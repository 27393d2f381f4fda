from .users import (
    ListUsersUseCase,
    GetUserUseCase,
    CreateUserUseCase,
    ReplaceUserUseCase,
    PatchUserUseCase,
    DeleteUserUseCase,
)
from .auth import LoginUserUseCase

__all__ = [
    "ListUsersUseCase",
    "GetUserUseCase",
    "CreateUserUseCase",
    "ReplaceUserUseCase",
    "PatchUserUseCase",
    "DeleteUserUseCase",
    "LoginUserUseCase",
]
