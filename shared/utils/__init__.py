"""
Logbook Shared Utilities
Common utility functions and classes used across services
"""

from .config import Settings, get_settings
from .errors import AnnotationContractError, LogbookError, ValidationError
from .logger import get_logger, get_logger_with_context

__all__ = [
    # Config
    "get_settings",
    "Settings",
    # Logging
    "get_logger",
    "get_logger_with_context",
    # Errors
    "LogbookError",
    "ValidationError",
    "AnnotationContractError",
]
