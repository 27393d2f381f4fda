# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import UserNotFoundError
from ...dto.user_dto import UserPatchRequest, UserResponse, to_user_response
from ...validation.user_validator import UserValidator

logger = logging.getLogger(__name__)


class PatchUserUseCase:
    """Use case for updating only the supplied fields of a user"""
    
    def __init__(
        self,
        user_repository: UserRepository,
        validator: Optional[UserValidator] = None,
    ) -> None:
        self.user_repository = user_repository
        self.validator = validator or UserValidator(user_repository)
    
    async def execute(self, raw_id: Optional[str], request: UserPatchRequest) -> UserResponse:
        """
        Merge the supplied fields into an existing user
        
        Args:
            raw_id: User ID as received in the request path
            request: Patch request; omitted or empty fields are left untouched
            
        Returns:
            UserResponse with updated user information
        """
        user_id, changes = await self.validator.validate_patch(
            raw_id,
            username=request.username,
            email=request.email,
            password=request.password,
        )
        
        fields = changes.as_dict()
        updated_user = await self.user_repository.update(user_id, fields)
        if updated_user is None:
            raise UserNotFoundError()
        
        logger.info(f"Patched user {user_id} fields: {', '.join(sorted(fields))}")
        return to_user_response(updated_user)
