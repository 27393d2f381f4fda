# Standard library imports
from typing import List, Optional

# External package imports
from fastapi import APIRouter

# Local application imports
from ...application.dto.user_dto import (
    UserCreateRequest,
    UserUpdateRequest,
    UserPatchRequest,
    UserResponse,
    UserEnvelope,
    MessageResponse,
)
from ...application.use_cases.users.list_users import ListUsersUseCase
from ...application.use_cases.users.get_user import GetUserUseCase
from ...application.use_cases.users.create_user import CreateUserUseCase
from ...application.use_cases.users.replace_user import ReplaceUserUseCase
from ...application.use_cases.users.patch_user import PatchUserUseCase
from ...application.use_cases.users.delete_user import DeleteUserUseCase
from ...di.container import get_container


router = APIRouter(tags=["users"])

# Validation and lookup failures raised by the use cases are rendered by the
# UserServiceError handler registered in main.py.


@router.get("", response_model=List[UserResponse])
async def list_users() -> List[UserResponse]:
    """
    List all users
    
    Returns:
        List of UserResponse objects (passwords omitted)
    """
    container = get_container()
    list_users_use_case = container.get(ListUsersUseCase)
    
    return await list_users_use_case.execute()


@router.get("/{user_id}", response_model=UserEnvelope)
async def get_user(user_id: str) -> UserEnvelope:
    """
    Get a user by ID
    
    Args:
        user_id: ID of the user (validated by the use case)
        
    Returns:
        UserEnvelope with user information
    """
    container = get_container()
    get_user_use_case = container.get(GetUserUseCase)
    
    user = await get_user_use_case.execute(user_id)
    return UserEnvelope(message="User found", user=user)


@router.post("", response_model=UserEnvelope)
async def create_user(request: Optional[UserCreateRequest] = None) -> UserEnvelope:
    """
    Create a new user
    
    Args:
        request: User creation request; a missing body counts as empty
        
    Returns:
        UserEnvelope with created user information
    """
    container = get_container()
    create_user_use_case = container.get(CreateUserUseCase)
    
    user = await create_user_use_case.execute(request or UserCreateRequest())
    return UserEnvelope(message="User created", user=user)


@router.put("/{user_id}", response_model=UserEnvelope)
async def replace_user(
    user_id: str,
    request: Optional[UserUpdateRequest] = None,
) -> UserEnvelope:
    """
    Replace username, email and password of a user
    
    Args:
        user_id: ID of the user
        request: Full update request
        
    Returns:
        UserEnvelope with updated user information
    """
    container = get_container()
    replace_user_use_case = container.get(ReplaceUserUseCase)
    
    user = await replace_user_use_case.execute(user_id, request or UserUpdateRequest())
    return UserEnvelope(message="User updated", user=user)


@router.patch("/{user_id}", response_model=UserEnvelope)
async def patch_user(
    user_id: str,
    request: Optional[UserPatchRequest] = None,
) -> UserEnvelope:
    """
    Update only the supplied fields of a user
    
    Args:
        user_id: ID of the user
        request: Partial update request
        
    Returns:
        UserEnvelope with updated user information
    """
    container = get_container()
    patch_user_use_case = container.get(PatchUserUseCase)
    
    user = await patch_user_use_case.execute(user_id, request or UserPatchRequest())
    return UserEnvelope(message="User updated", user=user)


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(user_id: str) -> MessageResponse:
    container = get_container()
    delete_user_use_case = container.get(DeleteUserUseCase)
    
    await delete_user_use_case.execute(user_id)
    return MessageResponse(message="User deleted")
