# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import UserNotFoundError
from ...dto.user_dto import UserUpdateRequest, UserResponse, to_user_response
from ...validation.user_validator import UserValidator

logger = logging.getLogger(__name__)


class ReplaceUserUseCase:
    """Use case for replacing username, email and password of a user"""
    
    def __init__(
        self,
        user_repository: UserRepository,
        validator: Optional[UserValidator] = None,
    ) -> None:
        self.user_repository = user_repository
        self.validator = validator or UserValidator(user_repository)
    
    async def execute(self, raw_id: Optional[str], request: UserUpdateRequest) -> UserResponse:
        """
        Overwrite all writable fields of an existing user
        
        Args:
            raw_id: User ID as received in the request path
            request: Update request with username, email and password
            
        Returns:
            UserResponse with updated user information
            
        Raises:
            UserServiceError: The first validation rule the request breaks
        """
        user_id, changes = await self.validator.validate_replace(
            raw_id,
            username=request.username,
            email=request.email,
            password=request.password,
        )
        
        updated_user = await self.user_repository.update(user_id, changes.as_dict())
        if updated_user is None:
            raise UserNotFoundError()
        
        logger.info(f"Replaced user {user_id}")
        return to_user_response(updated_user)
