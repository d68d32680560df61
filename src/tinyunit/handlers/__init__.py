"""
Logging and error handling for the tinyunit framework.
"""

from .error_handler import (
    CheckFailedError,
    ConfigurationError,
    ErrorHandler,
    TinyUnitError,
    UnresolvedTestMethodError,
)
from .logging_handler import LoggingHandler

__all__ = [
    "CheckFailedError",
    "ConfigurationError",
    "ErrorHandler",
    "TinyUnitError",
    "UnresolvedTestMethodError",
    "LoggingHandler",
]
