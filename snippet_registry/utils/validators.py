"""Binding validation utilities."""
from typing import Any, Dict, Iterable, Mapping
from .placeholders import PlaceholderScanner
from ..core.exceptions import ValidationError

class BindingValidator:
    """Validation and parsing of placeholder bindings."""

    @staticmethod
    def parse_pair(pair: str) -> tuple:
        """Split a `key=value` argument. The value may itself contain '='."""
        if "=" not in pair:
            raise ValidationError(f"Binding must look like key=value: {pair}", {"binding": pair})

        key, value = pair.split("=", 1)
        key = key.strip()
        if not PlaceholderScanner.is_valid_identifier(key):
            raise ValidationError(f"Invalid placeholder name in binding: {pair}", {"binding": pair})
        return key, value

    @staticmethod
    def parse_pairs(pairs: Iterable[str]) -> Dict[str, str]:
        """Parse repeated `key=value` arguments into a binding set. Later pairs win."""
        bindings = {}
        for pair in pairs:
            key, value = BindingValidator.parse_pair(pair)
            bindings[key] = value
        return bindings

    @staticmethod
    def validate_mapping(data: Any) -> Dict[str, str]:
        """Validate a structured binding record, converting scalar values to text."""
        if data is None:
            return {}
        if not isinstance(data, Mapping):
            raise ValidationError("Bindings must be a mapping of placeholder names to values")

        bindings = {}
        for key, value in data.items():
            if not isinstance(key, str) or not PlaceholderScanner.is_valid_identifier(key):
                raise ValidationError(f"Invalid placeholder name in bindings: {key}", {"binding": str(key)})
            if isinstance(value, (dict, list)):
                raise ValidationError(f"Binding value for '{key}' must be a scalar", {"binding": key})
            bindings[key] = "" if value is None else str(value)
        return bindings
