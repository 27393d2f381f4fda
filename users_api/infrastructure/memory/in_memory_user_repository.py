# Standard library imports
import dataclasses
import logging
import threading
from typing import Dict, List, Optional

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    """
    In-memory implementation of UserRepository.

    Users are kept in insertion order together with an ID counter that only
    ever grows, so IDs are never reused after a delete. Callers receive copies;
    the stored records are only changed through this class.

    Examples:
        >>> repo = InMemoryUserRepository()
        >>> user_id = await repo.next_id()
        >>> await repo.insert(User(id=user_id, username="alice", email="a@x.com", password="abc123"))
        >>> await repo.username_exists("alice")
        True
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._max_id = 0
        self._users: List[User] = []

    async def next_id(self) -> int:
        """
        Advance the ID counter

        Returns:
            The counter value after incrementing (1 on first call)
        """
        with self._lock:
            self._max_id += 1
            return self._max_id

    async def list(self) -> List[User]:
        with self._lock:
            return [dataclasses.replace(user) for user in self._users]

    async def find_by_id(self, user_id: int) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            Copy of the stored user if found, None otherwise
        """
        with self._lock:
            user = self._get(user_id)
            return dataclasses.replace(user) if user else None

    async def username_exists(self, username: str, exclude_id: Optional[int] = None) -> bool:
        with self._lock:
            return any(
                user.username == username and user.id != exclude_id
                for user in self._users
            )

    async def email_exists(self, email: str, exclude_id: Optional[int] = None) -> bool:
        with self._lock:
            return any(
                user.email == email and user.id != exclude_id
                for user in self._users
            )

    async def find_by_credentials(self, username: str, password: str) -> Optional[User]:
        """
        Find the user whose username and password both match exactly

        Args:
            username: Username to match
            password: Password to match

        Returns:
            Copy of the matching user, None when nothing matches
        """
        with self._lock:
            for user in self._users:
                if user.username == username and user.password == password:
                    return dataclasses.replace(user)
            return None

    async def insert(self, user: User) -> User:
        """
        Append a new user

        Args:
            user: User with an ID obtained from next_id()

        Returns:
            Copy of the stored user

        Raises:
            ValueError: If a user with the same ID is already stored
        """
        if not user:
            raise ValueError("User cannot be None")

        with self._lock:
            if self._get(user.id) is not None:
                raise ValueError(f"User with ID {user.id} already exists")
            stored = dataclasses.replace(user)
            self._users.append(stored)
            logger.debug(f"Stored user {stored.id} ({len(self._users)} total)")
            return dataclasses.replace(stored)

    async def update(self, user_id: int, changes: Dict[str, str]) -> Optional[User]:
        """
        Merge changes into an existing user in place

        Args:
            user_id: ID of the user to change
            changes: Mapping of writable field name to new value

        Returns:
            Copy of the updated user, None if no user has this ID

        Raises:
            ValueError: If changes name a field that is not writable
        """
        unknown = set(changes) - set(UserFields.WRITABLE)
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")

        with self._lock:
            user = self._get(user_id)
            if user is None:
                return None
            for name, value in changes.items():
                setattr(user, name, value)
            return dataclasses.replace(user)

    async def remove(self, user_id: int) -> bool:
        """
        Delete user by ID

        Returns:
            True if a user was removed, False if none had this ID
        """
        with self._lock:
            for index, user in enumerate(self._users):
                if user.id == user_id:
                    del self._users[index]
                    return True
            return False

    def clear(self) -> None:
        """Remove all users. The ID counter keeps its value."""
        with self._lock:
            self._users.clear()

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def _get(self, user_id: int) -> Optional[User]:
        for user in self._users:
            if user.id == user_id:
                return user
        return None
