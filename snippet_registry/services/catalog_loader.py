"""
Catalog loading for the template registry.
Reads template definitions from YAML files and registers them at startup.
"""
import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from ..core.config import CatalogConfig, Settings
from ..core.exceptions import CatalogLoadError
from ..utils.logging import CorrelatedLogger
from .template_registry import TemplateRegistry

logger = CorrelatedLogger(__name__)


@dataclass
class TemplateDefinition:
    """A template entry as read from a catalog file."""
    name: str
    body: str
    description: Optional[str] = None


def load_catalog(path: Union[str, Path]) -> List[TemplateDefinition]:
    """
    Load template definitions from a YAML catalog file.

    The file holds a top-level `templates` list; each entry needs `name`
    and `body` and may carry a `description`.

    Args:
        path: Catalog file path

    Returns:
        Template definitions in file order

    Raises:
        CatalogLoadError: If the file is missing, unreadable or malformed
    """
    path = Path(path)

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise CatalogLoadError(str(path), str(e))
    except yaml.YAMLError as e:
        raise CatalogLoadError(str(path), f"invalid YAML: {e}")

    if not isinstance(data, dict) or not isinstance(data.get("templates"), list):
        raise CatalogLoadError(str(path), "expected a top-level 'templates' list")

    definitions = []
    for index, entry in enumerate(data["templates"]):
        if not isinstance(entry, dict):
            raise CatalogLoadError(str(path), f"entry {index} is not a mapping")

        name = entry.get("name")
        body = entry.get("body")
        if not isinstance(name, str) or not name:
            raise CatalogLoadError(str(path), f"entry {index} is missing 'name'")
        if not isinstance(body, str):
            raise CatalogLoadError(str(path), f"template '{name}' is missing 'body'")

        description = entry.get("description")
        definitions.append(TemplateDefinition(
            name=name,
            body=body,
            description=str(description).strip() if description is not None else None
        ))

    return definitions


def populate_registry(registry: TemplateRegistry, path: Union[str, Path]) -> int:
    """Register every template of a catalog file. Returns the number registered."""
    definitions = load_catalog(path)
    for definition in definitions:
        registry.register(definition.name, definition.body, definition.description)

    logger.info(f"Loaded {len(definitions)} templates from {path}")
    return len(definitions)


def build_registry(
    settings: Settings,
    catalog_path: Optional[str] = None,
    policy: Optional[str] = None,
    include_builtin: Optional[bool] = None
) -> TemplateRegistry:
    """
    Build a registry from the configured catalogs.

    Args:
        settings: Application settings
        catalog_path: Extra catalog file, overrides settings.catalog_path
        policy: Missing-binding policy, overrides settings.missing_binding_policy
        include_builtin: Load the shipped catalogs, overrides settings.include_builtin_catalog

    Returns:
        Populated TemplateRegistry
    """
    policy = policy or settings.missing_binding_policy
    registry = TemplateRegistry(policy=policy)

    if include_builtin is None:
        include_builtin = settings.include_builtin_catalog

    if include_builtin:
        for builtin_path in CatalogConfig.get_builtin_paths():
            populate_registry(registry, builtin_path)

    extra_path = catalog_path or settings.catalog_path
    if extra_path:
        populate_registry(registry, extra_path)

    logger.info(f"Template registry ready with {len(registry)} templates (policy={policy})")
    return registry
