# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from .api.v1 import users_router, auth_router, health_router
from .core.config import get_settings
from .core.logging_config import configure_logging
from .di.container import get_container
from .domain.exceptions import UserServiceError
from .domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Request body must be a JSON object with string fields"
INTERNAL_ERROR_MESSAGE = "Internal server error"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Builds the DI container up front so the user store exists before the
    first request.
    """
    container = get_container()
    container.get(UserRepository)
    logger.info("User store initialized")

    yield

    logger.info("Application shutdown complete")


async def handle_user_service_error(request: Request, exception: UserServiceError) -> JSONResponse:
    logger.info(
        f"{request.method} {request.url.path} rejected "
        f"({exception.status_code}): {exception.message}"
    )
    return JSONResponse(
        status_code=exception.status_code,
        content={"message": exception.message},
    )


async def handle_request_validation_error(request: Request, exception: RequestValidationError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} rejected: malformed body")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": INVALID_BODY_MESSAGE},
    )


async def handle_http_exception(request: Request, exception: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exception.status_code,
        content={"message": str(exception.detail)},
        headers=getattr(exception, "headers", None),
    )


async def handle_unexpected_error(request: Request, exception: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exception}",
        exc_info=True,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_ERROR_MESSAGE},
    )


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Exception handlers rendering every error as {"message": ...}
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    configure_logging(settings.log_level)

    # Create FastAPI app
    application = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        description="In-memory user management API",
        lifespan=lifespan
    )

    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register exception handlers
    application.add_exception_handler(UserServiceError, handle_user_service_error)
    application.add_exception_handler(RequestValidationError, handle_request_validation_error)
    application.add_exception_handler(StarletteHTTPException, handle_http_exception)
    application.add_exception_handler(Exception, handle_unexpected_error)

    # Register API routers
    application.include_router(health_router)
    application.include_router(users_router, prefix="/v1/users")
    application.include_router(auth_router, prefix="/v1")

    return application


# Create application instance
app = create_application()
