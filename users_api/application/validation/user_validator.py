# Standard library imports
import logging
import re
from typing import Optional, Tuple

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User, UserChanges
from ...domain.constants import UserLimits
from ...domain.exceptions import (
    InvalidIdError,
    MissingFieldsError,
    InvalidUsernameError,
    UsernameTakenError,
    InvalidEmailError,
    EmailTakenError,
    WeakPasswordError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
USER_ID_PATTERN = re.compile(r"[0-9]+")

PATCH_MISSING_FIELDS_MESSAGE = (
    "Must have at least one field, allowed fields are: username, email, password"
)
LOGIN_MISSING_FIELDS_MESSAGE = "Must have valid username and password"


def is_supplied(value: Optional[str]) -> bool:
    """A field counts as supplied unless it is absent (None) or the empty string"""
    return value is not None and value != ""


def parse_user_id(raw_id: Optional[str]) -> int:
    """
    Parse a user ID taken from the request path

    Args:
        raw_id: Raw path segment, surrounding whitespace allowed

    Returns:
        The ID as an int

    Raises:
        InvalidIdError: If the value is missing, not a base-10 integer, or below 1
    """
    if raw_id is None:
        raise InvalidIdError()

    candidate = str(raw_id).strip()
    if not USER_ID_PATTERN.fullmatch(candidate):
        raise InvalidIdError()

    user_id = int(candidate)
    if user_id < 1:
        raise InvalidIdError()
    return user_id


def check_username_length(username: str) -> str:
    """
    Check a username is 3..32 characters long, as given

    Raises:
        InvalidUsernameError: If the length is out of bounds
    """
    if not UserLimits.USERNAME_MIN_LENGTH <= len(username) <= UserLimits.USERNAME_MAX_LENGTH:
        raise InvalidUsernameError()
    return username


def normalize_username(username: str) -> str:
    """
    Trim a username and check its length

    Raises:
        InvalidUsernameError: If the trimmed length is outside 3..32
    """
    return check_username_length(username.strip())


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_password(password: str) -> bool:
    """
    Check password length and character classes

    A valid password is 2..32 characters long, uses only ASCII letters and
    digits, and contains at least one of each.
    """
    if not UserLimits.PASSWORD_MIN_LENGTH <= len(password) <= UserLimits.PASSWORD_MAX_LENGTH:
        return False

    has_letter = False
    has_digit = False
    for char in password:
        if "0" <= char <= "9":
            has_digit = True
        elif "a" <= char <= "z" or "A" <= char <= "Z":
            has_letter = True
        else:
            return False

    return has_letter and has_digit


class UserValidator:
    """
    Validation and business rules for every user operation.

    Each validate_* method applies its checks in a fixed order and raises the
    first failure as a UserServiceError subclass. On success it returns the
    normalized values the caller should write.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def validate_create(
        self,
        username: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> UserChanges:
        """
        Validate a new user

        Returns:
            UserChanges with all three fields set

        Raises:
            MissingFieldsError, InvalidUsernameError, UsernameTakenError,
            InvalidEmailError, EmailTakenError, WeakPasswordError
        """
        self._require_all(username, email, password)

        return UserChanges(
            username=await self._check_username(username),
            email=await self._check_email(email),
            password=self._check_password(password),
        )

    async def validate_replace(
        self,
        raw_id: Optional[str],
        username: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> Tuple[int, UserChanges]:
        """
        Validate a full update of an existing user

        Uniqueness checks ignore the user being updated, so resubmitting its
        current username and email is accepted.

        Returns:
            Tuple of (user ID, UserChanges with all three fields set)

        Raises:
            InvalidIdError, MissingFieldsError, UserNotFoundError, then the
            same field errors as validate_create
        """
        user_id = parse_user_id(raw_id)
        self._require_all(username, email, password)
        await self._require_existing(user_id)

        changes = UserChanges(
            username=await self._check_username(username, exclude_id=user_id),
            email=await self._check_email(email, exclude_id=user_id),
            password=self._check_password(password),
        )
        return user_id, changes

    async def validate_patch(
        self,
        raw_id: Optional[str],
        username: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> Tuple[int, UserChanges]:
        """
        Validate a partial update of an existing user

        Only supplied fields are checked; the others stay None in the result.

        Returns:
            Tuple of (user ID, UserChanges holding only the supplied fields)
        """
        user_id = parse_user_id(raw_id)
        await self._require_existing(user_id)

        if not any(is_supplied(value) for value in (username, email, password)):
            raise MissingFieldsError(PATCH_MISSING_FIELDS_MESSAGE)

        changes = UserChanges()
        if is_supplied(username):
            changes.username = await self._check_username(username, exclude_id=user_id)
        if is_supplied(email):
            changes.email = await self._check_email(email, exclude_id=user_id)
        if is_supplied(password):
            changes.password = self._check_password(password)
        return user_id, changes

    async def validate_existing(self, raw_id: Optional[str]) -> User:
        """
        Validate an ID that must refer to a stored user

        Returns:
            The stored user

        Raises:
            InvalidIdError, UserNotFoundError
        """
        user_id = parse_user_id(raw_id)
        return await self._require_existing(user_id)

    def validate_login(self, username: Optional[str], password: Optional[str]) -> UserChanges:
        """
        Validate login credentials by format only

        Login is a lookup, so uniqueness is not checked and the username is
        not trimmed: it must match the stored value exactly.

        Returns:
            UserChanges with username and password set as given
        """
        if not (is_supplied(username) and is_supplied(password)):
            raise MissingFieldsError(LOGIN_MISSING_FIELDS_MESSAGE)

        return UserChanges(
            username=check_username_length(username),
            password=self._check_password(password),
        )

    def _require_all(self, *values: Optional[str]) -> None:
        if not all(is_supplied(value) for value in values):
            raise MissingFieldsError()

    async def _require_existing(self, user_id: int) -> User:
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        return user

    async def _check_username(self, username: str, exclude_id: Optional[int] = None) -> str:
        trimmed = normalize_username(username)
        if await self.user_repository.username_exists(trimmed, exclude_id=exclude_id):
            logger.debug("Username already taken")
            raise UsernameTakenError()
        return trimmed

    async def _check_email(self, email: str, exclude_id: Optional[int] = None) -> str:
        if not is_valid_email(email):
            raise InvalidEmailError()
        if await self.user_repository.email_exists(email, exclude_id=exclude_id):
            logger.debug("Email already taken")
            raise EmailTakenError()
        return email

    def _check_password(self, password: str) -> str:
        if not is_valid_password(password):
            raise WeakPasswordError()
        return password
