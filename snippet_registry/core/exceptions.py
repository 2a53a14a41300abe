"""Custom exceptions for the Snippet Registry."""
from typing import Optional

class SnippetRegistryError(Exception):
    """Base exception for snippet registry errors."""

    def __init__(self, message: str, error_code: str, details: Optional[dict] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

class ValidationError(SnippetRegistryError):
    """Exception raised for input validation errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message, "VALIDATION_ERROR", details)

class DuplicateNameError(SnippetRegistryError):
    """Exception raised when a template name is already registered."""

    def __init__(self, name: str):
        message = f"template already registered: {name}"
        details = {"name": name}
        super().__init__(message, "DUPLICATE_TEMPLATE", details)

class NotFoundError(SnippetRegistryError):
    """Exception raised when no template is registered under a name."""

    def __init__(self, name: str):
        message = f"unknown template: {name}"
        details = {"name": name}
        super().__init__(message, "TEMPLATE_NOT_FOUND", details)

class MissingBindingError(SnippetRegistryError):
    """Exception raised when a placeholder has no supplied value."""

    def __init__(self, name: str, placeholder: str):
        message = f"missing binding for placeholder '{placeholder}' in template: {name}"
        details = {"name": name, "placeholder": placeholder}
        super().__init__(message, "MISSING_BINDING", details)

class MalformedTemplateError(SnippetRegistryError):
    """Exception raised when a template body contains a bad placeholder token."""

    def __init__(self, name: str, position: int, reason: str):
        message = f"malformed template '{name}' at position {position}: {reason}"
        details = {"name": name, "position": position, "reason": reason}
        super().__init__(message, "MALFORMED_TEMPLATE", details)

class CatalogLoadError(SnippetRegistryError):
    """Exception raised when a catalog file cannot be loaded."""

    def __init__(self, path: str, reason: str):
        message = f"Failed to load catalog {path}: {reason}"
        details = {"path": path, "reason": reason}
        super().__init__(message, "CATALOG_LOAD_ERROR", details)

class ConfigurationError(SnippetRegistryError):
    """Exception raised for configuration errors."""

    def __init__(self, setting: str, reason: str):
        message = f"Configuration error for {setting}: {reason}"
        details = {"setting": setting, "reason": reason}
        super().__init__(message, "CONFIGURATION_ERROR", details)
