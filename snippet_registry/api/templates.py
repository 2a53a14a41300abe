"""Template API endpoints - read-only access to the registry."""
import time
from fastapi import APIRouter, Depends

from snippet_registry.core.dependencies import get_template_registry_dep
from snippet_registry.core.exceptions import SnippetRegistryError
from snippet_registry.models.requests import RenderRequest
from snippet_registry.models.responses import (
    TemplateSummary, TemplateDetail, TemplateListData, RenderData
)
from snippet_registry.services import TemplateRegistry
from snippet_registry.utils.logging import CorrelatedLogger, MetricsLogger
from snippet_registry.utils.response_helpers import ResponseHelper

# Create router
router = APIRouter(prefix="/templates", tags=["templates"])

metrics_logger = MetricsLogger()


@router.get("")
async def list_templates(registry: TemplateRegistry = Depends(get_template_registry_dep)):
    """List registered templates in name order."""
    request_id = ResponseHelper.generate_request_id()

    templates = [
        TemplateSummary(name=template.name, description=template.description)
        for template in registry
    ]
    data = TemplateListData(templates=templates, total=len(templates))

    return ResponseHelper.create_success_response(data.model_dump(), request_id)


@router.get("/{name}")
async def get_template(name: str, registry: TemplateRegistry = Depends(get_template_registry_dep)):
    """Get a template's body, description and placeholders."""
    request_id = ResponseHelper.generate_request_id()

    try:
        template = registry.get(name)
    except SnippetRegistryError as e:
        return ResponseHelper.create_error_from_exception(e, request_id)

    data = TemplateDetail(**template.to_dict())
    return ResponseHelper.create_success_response(data.model_dump(), request_id)


@router.post("/{name}/render")
async def render_template(
    name: str,
    request: RenderRequest,
    registry: TemplateRegistry = Depends(get_template_registry_dep)
):
    """Render a template with the supplied bindings."""
    request_id = ResponseHelper.generate_request_id()
    logger = CorrelatedLogger(__name__, request_id)
    start_time = time.time()

    try:
        text = registry.render(name, request.bindings, policy=request.policy)
    except SnippetRegistryError as e:
        processing_time_ms = int((time.time() - start_time) * 1000)
        logger.warning(f"Render failed for '{name}': {e.message}")
        metrics_logger.log_render_metrics(
            request_id, name, False, processing_time_ms,
            binding_count=len(request.bindings), error_code=e.error_code
        )
        return ResponseHelper.create_error_from_exception(e, request_id)

    processing_time_ms = int((time.time() - start_time) * 1000)
    metrics_logger.log_render_metrics(
        request_id, name, True, processing_time_ms, binding_count=len(request.bindings)
    )

    data = RenderData(name=name, text=text)
    return ResponseHelper.create_success_response(data.model_dump(), request_id, processing_time_ms)
