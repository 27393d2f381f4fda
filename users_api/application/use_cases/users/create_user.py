# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ...dto.user_dto import UserCreateRequest, UserResponse, to_user_response
from ...validation.user_validator import UserValidator

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for creating a new user"""
    
    def __init__(
        self,
        user_repository: UserRepository,
        validator: Optional[UserValidator] = None,
    ) -> None:
        self.user_repository = user_repository
        self.validator = validator or UserValidator(user_repository)
    
    async def execute(self, request: UserCreateRequest) -> UserResponse:
        """
        Create a new user
        
        Args:
            request: Creation request with username, email and password
            
        Returns:
            UserResponse with created user information
            
        Raises:
            UserServiceError: The first validation rule the request breaks
        """
        changes = await self.validator.validate_create(
            username=request.username,
            email=request.email,
            password=request.password,
        )
        
        # ID is taken only once validation passed, so rejected requests never consume one
        new_user = User(
            id=await self.user_repository.next_id(),
            username=changes.username,
            email=changes.email,
            password=changes.password,
        )
        saved_user = await self.user_repository.insert(new_user)
        
        logger.info(f"Created user {saved_user.id}")
        return to_user_response(saved_user)
