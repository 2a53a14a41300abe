"""API module initialization."""
from .templates import router as templates_router
from .health import router as health_router

__all__ = ["templates_router", "health_router"]
