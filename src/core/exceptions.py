"""
Exceptions shared across the application.
"""

from typing import Any, Optional


class InvalidArgument(ValueError):
    """Raised when a caller passes an empty or malformed argument."""
    def __init__(self, message: str, argument: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.message = message
        self.argument = argument
        self.value = value
