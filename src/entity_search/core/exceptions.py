"""
Unified Exception Hierarchy for Entity Search.

Exception Hierarchy:
    EntitySearchError (base)
    ├── ValidationError
    │   └── InvalidKindError
    ├── DataError
    │   └── MalformedRecordError
    └── ConfigurationError

Only InvalidKindError escapes ``search()``. MalformedRecordError is raised
inside adapters per record and absorbed there; the record is dropped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class ErrorSeverity(Enum):
    """Severity levels for errors."""
    WARNING = auto()      # Recoverable, processing continues
    ERROR = auto()        # Operation failed
    CRITICAL = auto()     # Cannot continue


class ErrorCategory(Enum):
    """Categories for error classification."""
    VALIDATION = "validation"
    DATA = "data"
    CONFIGURATION = "config"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Rich context for error messages."""
    operation: str | None = None
    input_value: Any = None
    suggestion: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


class EntitySearchError(Exception):
    """
    Base exception for all Entity Search errors.

    Provides:
    - Structured error context
    - Severity classification
    - Category for caller-side routing
    """

    __slots__ = ('context', 'severity', 'category')

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        category: ErrorCategory = ErrorCategory.DATA,
    ) -> None:
        super().__init__(message)
        self.context = context or ErrorContext()
        self.severity = severity
        self.category = category

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {
            "error": str(self),
            "category": self.category.value,
            "severity": self.severity.name.lower(),
        }
        if self.context.operation:
            result["operation"] = self.context.operation
        if self.context.suggestion:
            result["suggestion"] = self.context.suggestion
        return result


# =============================================================================
# Validation Errors
# =============================================================================

class ValidationError(EntitySearchError):
    """Base class for caller-contract violations."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.CRITICAL,
            category=ErrorCategory.VALIDATION,
        )


class InvalidKindError(ValidationError):
    """Raised when a query filter names a value outside EntityKind."""

    def __init__(
        self,
        value: Any,
        *,
        allowed: tuple[str, ...] = (),
        context: ErrorContext | None = None,
    ) -> None:
        ctx = context or ErrorContext()
        suggestion = ctx.suggestion
        if suggestion is None and allowed:
            suggestion = f"Use one of: {', '.join(allowed)}"
        ctx = ErrorContext(
            operation=ctx.operation or "search",
            input_value=value,
            suggestion=suggestion,
            metadata=ctx.metadata,
        )
        super().__init__(f"Invalid entity kind: {value!r}", context=ctx)
        self.value = value


# =============================================================================
# Data Errors
# =============================================================================

class DataError(EntitySearchError):
    """Base class for problems in upstream record data."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.WARNING,
            category=ErrorCategory.DATA,
        )


class MalformedRecordError(DataError):
    """Raised by an adapter when a record lacks a required identity field."""

    def __init__(
        self,
        kind: str,
        missing: str,
        *,
        record: Any = None,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = context or ErrorContext()
        ctx = ErrorContext(
            operation=ctx.operation or f"normalize:{kind}",
            input_value=record,
            suggestion=ctx.suggestion,
            metadata={**ctx.metadata, "missing": missing},
        )
        super().__init__(f"Malformed {kind} record: missing {missing}", context=ctx)
        self.kind = kind
        self.missing = missing


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(EntitySearchError):
    """Raised for configuration-related errors."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.CRITICAL,
            category=ErrorCategory.CONFIGURATION,
        )
