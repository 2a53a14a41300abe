"""Request models for the Snippet Registry."""
from typing import Dict, Optional
from pydantic import BaseModel, Field

class RenderRequest(BaseModel):
    """Request model for rendering a template."""
    bindings: Dict[str, str] = Field(default_factory=dict)
    policy: Optional[str] = None
