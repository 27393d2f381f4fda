from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.validation.user_validator import UserValidator
from ...application.use_cases.users.list_users import ListUsersUseCase
from ...application.use_cases.users.get_user import GetUserUseCase
from ...application.use_cases.users.create_user import CreateUserUseCase
from ...application.use_cases.users.replace_user import ReplaceUserUseCase
from ...application.use_cases.users.patch_user import PatchUserUseCase
from ...application.use_cases.users.delete_user import DeleteUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User use case provider - registers the validator and all user CRUD use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all user use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            UserValidator,
            lambda: UserValidator(
                user_repository=container.get(UserRepository)
            )
        )
        
        container.register_factory(
            ListUsersUseCase,
            lambda: ListUsersUseCase(
                user_repository=container.get(UserRepository)
            )
        )
        
        container.register_factory(
            GetUserUseCase,
            lambda: GetUserUseCase(
                user_repository=container.get(UserRepository),
                validator=container.get(UserValidator),
            )
        )
        
        container.register_factory(
            CreateUserUseCase,
            lambda: CreateUserUseCase(
                user_repository=container.get(UserRepository),
                validator=container.get(UserValidator),
            )
        )
        
        container.register_factory(
            ReplaceUserUseCase,
            lambda: ReplaceUserUseCase(
                user_repository=container.get(UserRepository),
                validator=container.get(UserValidator),
            )
        )
        
        container.register_factory(
            PatchUserUseCase,
            lambda: PatchUserUseCase(
                user_repository=container.get(UserRepository),
                validator=container.get(UserValidator),
            )
        )
        
        container.register_factory(
            DeleteUserUseCase,
            lambda: DeleteUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )
