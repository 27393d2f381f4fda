# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse, to_user_response


class ListUsersUseCase:
    """Use case for listing all users"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self) -> List[UserResponse]:
        """
        List all users in creation order
        
        Returns:
            List of UserResponse objects (no passwords)
        """
        users = await self.user_repository.list()
        return [to_user_response(user) for user in users]
