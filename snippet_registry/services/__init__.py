"""Service layer modules for the Snippet Registry."""
from .template_registry import TemplateRegistry
from .catalog_loader import TemplateDefinition, load_catalog, populate_registry, build_registry

__all__ = [
    "TemplateRegistry", "TemplateDefinition", "load_catalog", "populate_registry", "build_registry"
]
