"""Data models for the Snippet Registry."""
from .template import Template
from .requests import RenderRequest
from .responses import (
    ResponseMetadata, ErrorDetails, ErrorInfo, SuccessResponse, ErrorResponse,
    TemplateSummary, TemplateDetail, TemplateListData, RenderData, HealthData
)

__all__ = [
    "Template", "RenderRequest",
    "ResponseMetadata", "ErrorDetails", "ErrorInfo", "SuccessResponse", "ErrorResponse",
    "TemplateSummary", "TemplateDetail", "TemplateListData", "RenderData", "HealthData"
]
