from .list_users import ListUsersUseCase
from .get_user import GetUserUseCase
from .create_user import CreateUserUseCase
from .replace_user import ReplaceUserUseCase
from .patch_user import PatchUserUseCase
from .delete_user import DeleteUserUseCase

__all__ = [
    "ListUsersUseCase",
    "GetUserUseCase",
    "CreateUserUseCase",
    "ReplaceUserUseCase",
    "PatchUserUseCase",
    "DeleteUserUseCase",
]
