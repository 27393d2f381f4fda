from dataclasses import dataclass, field, fields
from typing import Dict, Optional


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: int
    username: str
    email: str
    password: str = field(repr=False)

    def __post_init__(self):
        """Business validations"""
        if not isinstance(self.id, int) or self.id < 1:
            raise ValueError("User ID must be a positive integer")


@dataclass
class UserChanges:
    """
    Normalized field values accepted by the validator.

    A field left as None was not supplied and must not be written.
    """
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)

    def as_dict(self) -> Dict[str, str]:
        return {
            item.name: getattr(self, item.name)
            for item in fields(self)
            if getattr(self, item.name) is not None
        }
