"""Health check endpoints."""
from datetime import datetime, timezone
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from snippet_registry.core.config import settings
from snippet_registry.core.dependencies import get_template_registry_dep
from snippet_registry.models.responses import HealthData
from snippet_registry.services import TemplateRegistry

router = APIRouter(tags=["health"])

@router.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Snippet Registry is running"}

@router.get("/health")
async def health_check(registry: TemplateRegistry = Depends(get_template_registry_dep)):
    """
    Health check endpoint with catalog status
    """
    health_data = HealthData(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=settings.api_version,
        template_count=len(registry),
        policy=registry.policy
    )

    return JSONResponse(
        status_code=200,
        content=health_data.model_dump()
    )
