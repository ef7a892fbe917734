"""
Named logger registry for the application.

Callers fetch a logger by subsystem name and use its leveled methods::

    from src.core.logging import get_logger

    logger = get_logger("app")
    logger.info("ready")
"""

from .config import LoggingConfig, LineFormatter, DiagnosticStreamHandler, setup_handler
from .levels import LogLevel
from .logger import Logger
from .registry import (
    LoggerRegistry,
    get_default_registry,
    set_default_registry,
    get_logger,
    getLogger,
)

__all__ = [
    'LogLevel',
    'LoggingConfig',
    'LineFormatter',
    'DiagnosticStreamHandler',
    'setup_handler',
    'Logger',
    'LoggerRegistry',
    'get_default_registry',
    'set_default_registry',
    'get_logger',
    'getLogger',
]
