"""Logging configuration and utilities."""
import logging
import sys
from typing import Optional
from ..core.config import settings

class LoggerSetup:
    """Centralized logging configuration."""

    @staticmethod
    def setup_logging(
        level: Optional[str] = None,
        format_string: Optional[str] = None,
        stream=None
    ) -> None:
        """Setup application logging."""
        log_level = level or settings.log_level
        log_format = format_string or settings.log_format

        # Configure root logger
        logging.basicConfig(
            level=getattr(logging, log_level.upper(), logging.INFO),
            format=log_format,
            handlers=[
                logging.StreamHandler(stream or sys.stdout)
            ]
        )

        # Set specific logger levels
        logging.getLogger("uvicorn").setLevel(logging.INFO)
        logging.getLogger("fastapi").setLevel(logging.INFO)

class CorrelatedLogger:
    """Logger with correlation ID support for request tracking."""

    def __init__(self, name: str, request_id: Optional[str] = None):
        self.logger = logging.getLogger(name)
        self.request_id = request_id

    def _format_message(self, message: str) -> str:
        """Format message with request ID if available."""
        if self.request_id:
            return f"[{self.request_id}] {message}"
        return message

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message with correlation ID."""
        self.logger.debug(self._format_message(message), **kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log info message with correlation ID."""
        self.logger.info(self._format_message(message), **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """Log warning message with correlation ID."""
        self.logger.warning(self._format_message(message), **kwargs)

    def error(self, message: str, **kwargs) -> None:
        """Log error message with correlation ID."""
        self.logger.error(self._format_message(message), **kwargs)

class MetricsLogger:
    """Logger for render metrics."""

    def __init__(self):
        self.logger = logging.getLogger("metrics")

    def log_render_metrics(
        self,
        request_id: str,
        template_name: str,
        success: bool,
        processing_time_ms: int,
        binding_count: int = 0,
        error_code: Optional[str] = None
    ) -> None:
        """Log template render metrics."""
        status = "success" if success else "failed"

        log_msg = (
            f"RENDER_METRICS request_id={request_id} "
            f"template={template_name} status={status} "
            f"processing_time_ms={processing_time_ms} bindings={binding_count}"
        )

        if error_code:
            log_msg += f" error_code={error_code}"

        self.logger.info(log_msg)
