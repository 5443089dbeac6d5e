# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Local application imports
from .api.v1 import auth_router, favorites_router, suggestions_router
from .api.v1.dependencies import login_redirect
from .core.config import get_settings
from .core.logging import configure_logging
from .di.container import get_container
from .domain.exceptions import SessionRequiredError, UserNotFoundError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Opens the container-owned MongoDB connection on startup and releases it,
    together with the pooled HTTP client, on shutdown.
    """
    container = get_container()
    await container.startup()
    logger.info("Application startup complete")

    yield

    await container.shutdown()
    logger.info("Application shutdown complete")


async def session_required_handler(request: Request, exc: SessionRequiredError):
    """Send unauthenticated requests to the login page, keeping the requested path"""
    return login_redirect(exc.redirect_to)


async def user_not_found_handler(request: Request, exc: UserNotFoundError):
    """A session pointing at a missing user is an invariant violation"""
    logger.error(f"Session references missing user {exc.user_id} on {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": exc.user_message},
    )


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading (fails fast on missing required settings)
    - Logging configuration
    - CORS middleware configuration
    - Exception handlers for session redirects and invariant violations
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
        title="Weather Favorites API",
        version="1.0.0",
        description="Session-gated favorite cities with current weather",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(SessionRequiredError, session_required_handler)
    application.add_exception_handler(UserNotFoundError, user_not_found_handler)

    application.include_router(auth_router)
    application.include_router(favorites_router)
    application.include_router(suggestions_router, prefix="/api/suggestions")

    return application


# Create application instance
app = create_application()
