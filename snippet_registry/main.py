"""Main FastAPI application exposing the template registry."""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from snippet_registry.core.config import settings
from snippet_registry.core.dependencies import get_template_registry
from snippet_registry.core.exceptions import SnippetRegistryError
from snippet_registry.api import templates_router, health_router
from snippet_registry.utils.logging import LoggerSetup
from snippet_registry.utils.response_helpers import ResponseHelper

# Setup logging
LoggerSetup.setup_logging()

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # All registrations happen here, before any request is served
    registry = get_template_registry()
    logger.info(f"{settings.api_title} v{settings.api_version} starting up with {len(registry)} templates")
    yield
    logger.info("Application shutting down")

# Create FastAPI application
app = FastAPI(
    title=settings.api_title,
    description=settings.api_description,
    version=settings.api_version,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Global exception handler for custom exceptions
@app.exception_handler(SnippetRegistryError)
async def snippet_registry_exception_handler(request, exc: SnippetRegistryError):
    """Handle custom snippet registry exceptions."""
    return ResponseHelper.create_error_from_exception(exc)

@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc: HTTPException):
    """Handle FastAPI HTTP exceptions."""
    return ResponseHelper.create_error_response(
        error_code="HTTP_ERROR",
        message=exc.detail,
        status_code=exc.status_code
    )

@app.exception_handler(Exception)
async def general_exception_handler(request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception("Unhandled error while serving request")

    return ResponseHelper.create_error_response(
        error_code="INTERNAL_SERVER_ERROR",
        message="An unexpected error occurred",
        status_code=500
    )

# Include routers
app.include_router(health_router)
app.include_router(templates_router)
