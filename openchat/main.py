# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import auth_router, message_router, greeting_router
from .core.config import get_settings
from .core.logging_config import configure_logging
from .di.container import get_container
from .domain.exceptions import OpenChatError, StorageUnavailableError
from .domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


async def openchat_error_handler(request: Request, exc: OpenChatError) -> JSONResponse:
    """Render a domain failure as its status code with a {"message": ...} body"""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Builds the DI container and creates the unique username index.
    """
    container = get_container()
    try:
        await container.get(UserRepository).ensure_indexes()
        logger.info(f"Storage ready (backend: {container.settings.storage_backend})")
    except StorageUnavailableError as e:
        # Startup continues; the user repository builds the index before its first insert
        logger.error(f"Failed to prepare storage: {e}")

    yield

    if container.settings.storage_backend != "memory":
        from .infrastructure.db.mongo_connection import close_database
        close_database()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Domain failure rendering
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="OpenChat API",
        version="1.0.0",
        description="User registration/login and message repository",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(OpenChatError, openchat_error_handler)

    # Register API routers
    application.include_router(auth_router, prefix="/api/v1/auth")
    application.include_router(message_router, prefix="/api/v1/messages")
    application.include_router(greeting_router, prefix="/api/v1/greeting")

    return application


# Create application instance
app = create_application()
