"""Template registry: named templates and placeholder substitution."""
import threading
from typing import Dict, Iterator, Mapping, Optional, Tuple

from ..core.config import RenderPolicy
from ..core.exceptions import (
    ConfigurationError, DuplicateNameError, MissingBindingError,
    NotFoundError, ValidationError
)
from ..models.template import Template
from ..utils.logging import CorrelatedLogger
from ..utils.placeholders import PLACEHOLDER


class TemplateRegistry:
    """
    In-memory catalog of named templates.

    Registration swaps in a new mapping under a lock, so readers never
    take the lock and never see a half-registered template.
    """

    def __init__(self, policy: str = RenderPolicy.STRICT):
        if not RenderPolicy.is_valid(policy):
            raise ConfigurationError(
                "MISSING_BINDING_POLICY",
                f"unknown policy '{policy}', expected one of {', '.join(RenderPolicy.ALL)}"
            )
        self.policy = policy
        self.logger = CorrelatedLogger(__name__)
        self._templates: Dict[str, Template] = {}
        self._lock = threading.Lock()

    def register(self, name: str, body: str, description: Optional[str] = None) -> Template:
        """
        Add a template to the registry.

        Args:
            name: Unique template name
            body: Template text with ${identifier} placeholders
            description: Optional usage notes

        Returns:
            The registered Template

        Raises:
            ValidationError: If name or body is not a usable string
            MalformedTemplateError: If the body contains a bad placeholder token
            DuplicateNameError: If the name is already registered
        """
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Template name must be a non-empty string", {"name": name})
        if not isinstance(body, str):
            raise ValidationError(f"Template body must be a string: {name}", {"name": name})

        template = Template.parse(name, body, description)

        with self._lock:
            if name in self._templates:
                raise DuplicateNameError(name)
            templates = dict(self._templates)
            templates[name] = template
            self._templates = templates

        self.logger.debug(f"Registered template '{name}' with placeholders {list(template.placeholders)}")
        return template

    def get(self, name: str) -> Template:
        """Get a template by name, raising NotFoundError if unknown."""
        template = self._templates.get(name)
        if template is None:
            raise NotFoundError(name)
        return template

    def render(self, name: str, bindings: Optional[Mapping[str, str]] = None,
               policy: Optional[str] = None) -> str:
        """
        Render a template by substituting its placeholders.

        Args:
            name: Template name
            bindings: Placeholder identifier -> replacement text
            policy: Overrides the registry policy for this call

        Returns:
            Rendered text

        Raises:
            NotFoundError: If the template is unknown
            MissingBindingError: Under the strict policy, for the first
                placeholder without a binding
        """
        template = self.get(name)
        bindings = bindings or {}
        policy = policy or self.policy
        if not RenderPolicy.is_valid(policy):
            raise ValidationError(f"Unknown render policy: {policy}", {"policy": policy})

        parts = []
        for kind, value in template.segments:
            if kind != PLACEHOLDER:
                parts.append(value)
            elif value in bindings:
                parts.append(str(bindings[value]))
            elif policy == RenderPolicy.KEEP:
                parts.append("${" + value + "}")
            else:
                raise MissingBindingError(name, value)

        return "".join(parts)

    def names(self) -> Tuple[str, ...]:
        """Get all registered template names, sorted."""
        return tuple(sorted(self._templates))

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    def __iter__(self) -> Iterator[Template]:
        templates = self._templates
        return iter([templates[name] for name in sorted(templates)])
