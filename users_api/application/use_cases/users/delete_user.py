# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import UserNotFoundError
from ...validation.user_validator import parse_user_id

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for deleting a user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, raw_id: Optional[str]) -> int:
        """
        Delete a user by ID
        
        Args:
            raw_id: User ID as received in the request path
            
        Returns:
            ID of the deleted user
            
        Raises:
            InvalidIdError: If the ID is not a positive integer
            UserNotFoundError: If no user has this ID
        """
        user_id = parse_user_id(raw_id)
        
        removed = await self.user_repository.remove(user_id)
        if not removed:
            raise UserNotFoundError()
        
        logger.info(f"Deleted user {user_id}")
        return user_id
