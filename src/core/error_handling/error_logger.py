"""
Error Logging Utility

Writes one line per handled error through the shared logger registry.
"""

from typing import Optional

from .error_types import ErrorType, ErrorContext
from ..logging import LoggerRegistry, get_default_registry


class ErrorLogger:
    """Logs handled errors under the ``errors`` logger."""

    @staticmethod
    def log_error(
        error_type: ErrorType,
        context: ErrorContext,
        original_exception: Optional[Exception] = None,
        registry: Optional[LoggerRegistry] = None,
        **format_kwargs
    ):
        if registry is None:
            registry = get_default_registry()
        logger = registry.get_logger("errors")
        message = error_type.format_message(**{**context.__dict__, **format_kwargs})
        line = f"{error_type.code} ({error_type.status_code}): {message}{context.describe()}"
        if original_exception is not None:
            line += f" | cause={type(original_exception).__name__}"

        if error_type.status_code >= 500:
            logger.error(line)
        else:
            logger.warn(line)
