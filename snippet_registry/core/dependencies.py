"""Dependency injection setup for FastAPI."""
from functools import lru_cache
from fastapi import Depends

from .config import settings
from snippet_registry.services import TemplateRegistry, build_registry

# Registry instance cache
@lru_cache()
def get_template_registry() -> TemplateRegistry:
    """Get the process-wide TemplateRegistry, built once from the configured catalogs."""
    return build_registry(settings)

def get_template_registry_dep(
    registry: TemplateRegistry = Depends(get_template_registry)
) -> TemplateRegistry:
    """Dependency for TemplateRegistry."""
    return registry
