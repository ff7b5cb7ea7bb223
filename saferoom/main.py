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

# Local application imports
from .api.middleware import BodySizeLimitMiddleware
from .api.v1 import analysis_router, health_router
from .core.config import get_settings
from .core.logging_config import setup_logging
from .infrastructure.http_client_factory import close_shared_http_client

logger = logging.getLogger(__name__)

# Request body ceiling (base64 images are large)
MAX_BODY_BYTES = 10 * 1024 * 1024


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Reports missing upstream configuration at startup and closes the shared
    HTTP client on shutdown.
    """
    missing = get_settings().missing_upstream_settings()
    if missing:
        logger.warning(
            f"Missing configuration: {', '.join(missing)}. "
            f"Room analysis requests will fail until these are set."
        )
    
    yield
    
    try:
        await close_shared_http_client()
    except Exception as e:
        logger.error(f"Error closing shared HTTP client: {e}", exc_info=True)
    
    logger.info("Application shutdown complete")


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """A body that is not a JSON object with a string imageBase64 is invalid input."""
    logger.debug(f"Request validation failed for {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "imageBase64 is required"},
    )


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading and logging
    - CORS middleware configuration (all origins)
    - Request body size limit
    - API route registration
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    setup_logging(get_settings().log_level)
    
    # Create FastAPI app
    application = FastAPI(
        title="Smart Safe Room API",
        version="1.0.0",
        description="Room snapshot safety analysis backed by Azure Vision and Azure OpenAI",
        lifespan=lifespan
    )
    
    application.add_middleware(BodySizeLimitMiddleware, max_body_bytes=MAX_BODY_BYTES)
    
    # Add CORS middleware (outermost)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    
    # Register API routers
    application.include_router(health_router)
    application.include_router(analysis_router)
    
    return application


# Create application instance
app = create_application()
