from .users_controller import router as users_router
from .auth_controller import router as auth_router
from .health_controller import router as health_router


__all__ = ["users_router", "auth_router", "health_router"]
