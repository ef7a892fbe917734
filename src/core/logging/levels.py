"""
Severity levels understood by the logger registry.
"""

import logging
from enum import Enum

from ..exceptions import InvalidArgument


class LogLevel(Enum):
    """Ordered from most to least severe."""

    ERROR = logging.ERROR
    WARN = logging.WARNING
    INFO = logging.INFO
    DEBUG = logging.DEBUG

    @property
    def stdlib_level(self) -> int:
        return self.value

    def allows(self, level: "LogLevel") -> bool:
        """True if a message at ``level`` passes a threshold of ``self``."""
        return level.value >= self.value

    @classmethod
    def parse(cls, name) -> "LogLevel":
        """
        Resolve a level name such as ``"info"`` or ``"WARNING"``.

        Args:
            name: Level name or an existing LogLevel

        Returns:
            LogLevel: Matching level

        Raises:
            InvalidArgument: If the name is not a known level
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise InvalidArgument(f"Log level must be a string, got {type(name).__name__}", "level", name)
        key = name.strip().upper()
        if key == "WARNING":
            key = "WARN"
        try:
            return cls[key]
        except KeyError:
            raise InvalidArgument(f"Unknown log level: {name!r}", "level", name) from None


def level_label(levelno: int) -> str:
    """Label used in output lines for a stdlib numeric level."""
    if levelno >= logging.ERROR:
        return "ERROR"
    if levelno >= logging.WARNING:
        return "WARN"
    if levelno >= logging.INFO:
        return "INFO"
    return "DEBUG"
