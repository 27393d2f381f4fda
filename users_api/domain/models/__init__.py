from .user import User, UserChanges

__all__ = ["User", "UserChanges"]
