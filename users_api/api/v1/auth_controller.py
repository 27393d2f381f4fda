# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter

# Local application imports
from ...application.dto.auth_dto import UserLoginRequest, LoginResponse
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...di.container import get_container


router = APIRouter(tags=["authentication"])


# GET with a JSON body is kept for existing clients; POST is the portable form.
@router.api_route("/login", methods=["GET", "POST"], response_model=LoginResponse)
async def login_user(request: Optional[UserLoginRequest] = None) -> LoginResponse:
    """
    Authenticate user and get a session token
    
    Args:
        request: User login request with username and password
        
    Returns:
        LoginResponse with user information and token
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)
    
    return await login_use_case.execute(request or UserLoginRequest())
