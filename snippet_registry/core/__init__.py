"""Core application modules."""
from .config import settings, CatalogConfig, RenderPolicy

__all__ = ["settings", "CatalogConfig", "RenderPolicy"]
