from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def next_id(self) -> int:
        """Advance the ID counter and return the new value"""
        pass

    @abstractmethod
    async def list(self) -> List[User]:
        """Return all users in insertion order"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def username_exists(self, username: str, exclude_id: Optional[int] = None) -> bool:
        """Check whether a user other than exclude_id has this username"""
        pass

    @abstractmethod
    async def email_exists(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """Check whether a user other than exclude_id has this email"""
        pass

    @abstractmethod
    async def find_by_credentials(self, username: str, password: str) -> Optional[User]:
        """Find the user whose username and password both match exactly"""
        pass

    @abstractmethod
    async def insert(self, user: User) -> User:
        """Append a new user"""
        pass

    @abstractmethod
    async def update(self, user_id: int, changes: Dict[str, str]) -> Optional[User]:
        """Merge changes into an existing user"""
        pass

    @abstractmethod
    async def remove(self, user_id: int) -> bool:
        """Delete user by ID, returning whether it existed"""
        pass
