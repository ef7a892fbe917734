"""
Error Types and Context Definitions

This module defines standardized error types and context information for
consistent error responses from the web application.
"""

from enum import Enum
from typing import Any, Dict, Optional
from fastapi import status


class ErrorType(Enum):
    """Enumeration of standard error types in the system."""

    # Validation Errors (400)
    INVALID_ARGUMENT = ("invalid_argument", status.HTTP_400_BAD_REQUEST, "Invalid argument: {error_details}")

    # Server Errors (500)
    INTERNAL_SERVER_ERROR = ("internal_server_error", status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error: {error_details}")

    def __init__(self, code: str, status_code: int, message_template: str):
        self.code = code
        self.status_code = status_code
        self.message_template = message_template

    def format_message(self, **kwargs) -> str:
        """Format the error message with provided parameters."""
        try:
            return self.message_template.format(**kwargs)
        except KeyError:
            # Fallback to template if formatting fails
            return self.message_template

    def create_error_detail(self, **kwargs) -> Dict[str, Any]:
        """Create standardized error detail dictionary."""
        return {
            "error": {
                "message": self.format_message(**kwargs),
                "code": self.code
            }
        }


class ErrorContext:
    """Context information for error handling."""

    def __init__(
        self,
        request_id: Optional[str] = None,
        endpoint_path: Optional[str] = None,
        **additional_context
    ):
        self.request_id = request_id
        self.endpoint_path = endpoint_path
        self.additional_context = additional_context

    def describe(self) -> str:
        """Render the context as a `` | key=value`` suffix for a log line."""
        parts = []
        if self.request_id:
            parts.append(f"request_id={self.request_id}")
        if self.endpoint_path:
            parts.append(f"path={self.endpoint_path}")
        for key, value in self.additional_context.items():
            parts.append(f"{key}={value}")
        return "".join(f" | {part}" for part in parts)
