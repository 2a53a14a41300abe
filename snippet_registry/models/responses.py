"""Response models for the Snippet Registry."""
from typing import Any, Optional, List
from pydantic import BaseModel

class ResponseMetadata(BaseModel):
    """Standard response metadata."""
    request_id: str
    api_version: str = "1.0.0"
    timestamp: Optional[str] = None
    processing_time_ms: Optional[int] = None

class ErrorDetails(BaseModel):
    """Detailed error information."""
    name: Optional[str] = None
    placeholder: Optional[str] = None
    position: Optional[int] = None
    reason: Optional[str] = None
    path: Optional[str] = None
    binding: Optional[str] = None
    policy: Optional[str] = None
    setting: Optional[str] = None

class ErrorInfo(BaseModel):
    """Error information structure."""
    code: str
    message: str
    details: Optional[ErrorDetails] = None

class SuccessResponse(BaseModel):
    """Standard success response."""
    success: bool = True
    data: Any
    metadata: ResponseMetadata

class ErrorResponse(BaseModel):
    """Standard error response."""
    success: bool = False
    error: ErrorInfo
    metadata: ResponseMetadata

class TemplateSummary(BaseModel):
    """Template listing entry."""
    name: str
    description: Optional[str] = None

class TemplateDetail(BaseModel):
    """Full template information."""
    name: str
    description: Optional[str] = None
    body: str
    placeholders: List[str]

class TemplateListData(BaseModel):
    """Template listing response data."""
    templates: List[TemplateSummary]
    total: int

class RenderData(BaseModel):
    """Render response data."""
    name: str
    text: str

class HealthData(BaseModel):
    """Health check response data."""
    status: str
    timestamp: str
    version: str
    template_count: int
    policy: str
