from .repository_provider import RepositoryProvider
from .user_provider import UserProvider
from .auth_provider import AuthProvider


__all__ = [
    "RepositoryProvider",
    "UserProvider",
    "AuthProvider",
]
