"""Utility modules for the Snippet Registry."""
from .placeholders import PlaceholderScanner
from .validators import BindingValidator
from .response_helpers import ResponseHelper
from .logging import LoggerSetup, CorrelatedLogger, MetricsLogger

__all__ = [
    "PlaceholderScanner", "BindingValidator", "ResponseHelper",
    "LoggerSetup", "CorrelatedLogger", "MetricsLogger"
]
