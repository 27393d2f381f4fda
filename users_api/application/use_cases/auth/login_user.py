# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import UserNotFoundError
from ....core.security import generate_session_token
from ...dto.auth_dto import UserLoginRequest, LoginResponse
from ...dto.user_dto import to_user_response
from ...validation.user_validator import UserValidator

logger = logging.getLogger(__name__)

LOGIN_SUCCESS_MESSAGE = "User logged in"


class LoginUserUseCase:
    """Use case for authenticating a user and issuing a session token"""
    
    def __init__(
        self,
        user_repository: UserRepository,
        validator: Optional[UserValidator] = None,
    ) -> None:
        self.user_repository = user_repository
        self.validator = validator or UserValidator(user_repository)
    
    async def execute(self, request: UserLoginRequest) -> LoginResponse:
        """
        Authenticate user and generate a session token
        
        An unknown username and a wrong password both raise the same
        UserNotFoundError, so callers cannot tell which one happened.
        
        Args:
            request: Login request with username and password
            
        Returns:
            LoginResponse with the user's public view and token
            
        Raises:
            MissingFieldsError, InvalidUsernameError, WeakPasswordError,
            UserNotFoundError
        """
        credentials = self.validator.validate_login(request.username, request.password)
        
        user = await self.user_repository.find_by_credentials(
            credentials.username,
            credentials.password,
        )
        if user is None:
            logger.info("Login rejected: no matching user")
            raise UserNotFoundError()
        
        logger.info(f"User {user.id} logged in")
        return LoginResponse(
            message=LOGIN_SUCCESS_MESSAGE,
            user=to_user_response(user),
            token=generate_session_token(),
        )
