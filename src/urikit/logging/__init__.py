"""Logging helpers for urikit (standard library ``logging`` only)."""
from .factory import DefaultLoggerFactory
from .helpers import JsonLogFormatter, get_logger, setup_base_logger, trace

__all__ = [
    'DefaultLoggerFactory',
    'JsonLogFormatter',
    'get_logger',
    'setup_base_logger',
    'trace',
]
