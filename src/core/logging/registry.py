"""
Process-wide registry of named loggers.

A registry lazily creates one Logger per name and returns the same instance
on every later request. The module keeps a default registry for callers that
just want ``get_logger("app")``; tests and embedding applications can build
their own isolated ``LoggerRegistry`` or install one with
``set_default_registry``.
"""

import threading
from typing import Dict, List, Optional, TextIO

from ..exceptions import InvalidArgument
from .config import LoggingConfig, setup_handler
from .levels import LogLevel
from .logger import Logger


def validate_name(name) -> str:
    """
    Check that a logger name is usable as a registry key.

    Raises:
        InvalidArgument: If the name is not a string, is empty or blank, or
            contains control characters such as line breaks
    """
    if not isinstance(name, str):
        raise InvalidArgument(f"Logger name must be a string, got {type(name).__name__}", "name", name)
    if not name.strip():
        raise InvalidArgument("Logger name must not be empty", "name", name)
    if any(not ch.isprintable() for ch in name):
        raise InvalidArgument(f"Logger name contains control characters: {name!r}", "name", name)
    return name


class LoggerRegistry:
    """
    Cache mapping subsystem name to its Logger.

    Lookups of an existing name take no lock. First-time creation is guarded
    by a lock and re-checked under it, so concurrent callers asking for a new
    name all receive the single instance that won.
    """

    def __init__(self, config: Optional[LoggingConfig] = None, stream: Optional[TextIO] = None):
        self._config = config if config is not None else LoggingConfig.from_env()
        self._threshold = self._config.threshold
        self._handler = setup_handler(self._config, stream)
        self._loggers: Dict[str, Logger] = {}
        self._lock = threading.Lock()

    @property
    def config(self) -> LoggingConfig:
        return self._config

    @property
    def threshold(self) -> LogLevel:
        return self._threshold

    def get_logger(self, name: str) -> Logger:
        """
        Return the Logger for ``name``, creating it on first use.

        Args:
            name: Subsystem name, e.g. "app" or "hello"

        Returns:
            Logger: The one instance registered for this name

        Raises:
            InvalidArgument: If the name is empty or malformed
        """
        validate_name(name)
        logger = self._loggers.get(name)
        if logger is not None:
            return logger

        with self._lock:
            logger = self._loggers.get(name)
            if logger is None:
                logger = Logger(name, self._threshold, self._handler)
                self._loggers[name] = logger
        return logger

    def names(self) -> List[str]:
        return list(self._loggers)

    def __contains__(self, name) -> bool:
        return name in self._loggers

    def __len__(self) -> int:
        return len(self._loggers)


_default_registry: Optional[LoggerRegistry] = None
_default_lock = threading.Lock()


def get_default_registry() -> LoggerRegistry:
    """Return the process-wide registry, creating it from the environment on first use."""
    global _default_registry
    registry = _default_registry
    if registry is not None:
        return registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = LoggerRegistry()
        return _default_registry


def set_default_registry(registry: Optional[LoggerRegistry]) -> Optional[LoggerRegistry]:
    """
    Install ``registry`` as the process-wide default.

    Passing ``None`` drops the current default so the next lookup builds a
    fresh one from the environment. Returns the previously installed registry.
    """
    global _default_registry
    with _default_lock:
        previous = _default_registry
        _default_registry = registry
    return previous


def get_logger(name: str) -> Logger:
    """Get a named logger from the process-wide registry."""
    return get_default_registry().get_logger(name)


getLogger = get_logger
