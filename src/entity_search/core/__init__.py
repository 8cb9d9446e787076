"""
Core module for Entity Search.

Provides:
- Unified exception hierarchy
"""

from .exceptions import (
    # Configuration errors
    ConfigurationError,
    # Data errors
    DataError,
    # Base
    EntitySearchError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    InvalidKindError,
    MalformedRecordError,
    # Validation errors
    ValidationError,
)

__all__ = [
    "EntitySearchError",
    "ErrorContext",
    "ErrorSeverity",
    "ErrorCategory",
    "ValidationError",
    "InvalidKindError",
    "DataError",
    "MalformedRecordError",
    "ConfigurationError",
]
