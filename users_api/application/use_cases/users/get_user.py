# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse, to_user_response
from ...validation.user_validator import UserValidator


class GetUserUseCase:
    """Use case for getting a single user by ID"""
    
    def __init__(
        self,
        user_repository: UserRepository,
        validator: Optional[UserValidator] = None,
    ) -> None:
        self.user_repository = user_repository
        self.validator = validator or UserValidator(user_repository)
    
    async def execute(self, raw_id: Optional[str]) -> UserResponse:
        """
        Get a user by ID
        
        Args:
            raw_id: User ID as received in the request path
            
        Returns:
            UserResponse with user information
            
        Raises:
            InvalidIdError: If the ID is not a positive integer
            UserNotFoundError: If no user has this ID
        """
        user = await self.validator.validate_existing(raw_id)
        return to_user_response(user)
