"""
Structured error types for patterndiff.

Provides a small hierarchy of typed errors with a category, structured
context and optional cause, so callers can tell expected rejections
(an unsupported version tag) from broken content (a category reference
that does not resolve) without parsing messages.

Manifesto:
    - **Typed hierarchy:** one base class, one subclass per failure domain
    - **Absence is not an error:** missing ids return ``None``; only
      malformed selectors and broken tables raise
    - **Rich context:** errors carry the offending ids for logging
    - **Error chaining:** the engine exception is kept as ``cause``

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                    PatternDiffError                          │
        │            (category, context, cause)                        │
        ├─────────────────────────────────────────────────────────────┤
        │  ValidationError        CatalogIntegrityError   ConfigError  │
        │  (VALIDATION)           (INTEGRITY)             (CONFIG)     │
        │       │                                                      │
        │  InvalidVersionError    HighlightError          RenderError  │
        │                         (HIGHLIGHT)             (RENDER)     │
        └─────────────────────────────────────────────────────────────┘

Examples:
    >>> error = InvalidVersionError(14)
    >>> error.category
    <ErrorCategory.VALIDATION: 'VALIDATION'>
    >>> error.value
    14

    >>> error = CatalogIntegrityError("Unknown category").with_context(example_id="x")
    >>> error.context.example_id
    'x'

Guardrails:
    ❌ DON'T: Raise for a missing example or category id
    ✅ DO: Return ``None`` and let the page decide

    ❌ DON'T: Let HighlightError escape the adapter
    ✅ DO: Wrap it in ``Err`` and take the fallback path

Tags:
    error-handling, exception-hierarchy, error-context, patterndiff
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification and logging."""

    VALIDATION = "VALIDATION"     # Bad selector passed by a caller
    INTEGRITY = "INTEGRITY"       # Static tables reference missing rows
    HIGHLIGHT = "HIGHLIGHT"       # Highlighting engine failures
    RENDER = "RENDER"             # Template/page rendering failures
    CONFIG = "CONFIG"             # Missing or invalid settings
    INTERNAL = "INTERNAL"         # Bugs, unexpected state


@dataclass
class ErrorContext:
    """
    Structured metadata context for errors.

    Typed fields cover the ids this project deals in; anything else goes
    into ``metadata``. ``to_dict()`` serializes only the fields that are set.

    Examples:
        >>> ErrorContext(example_id="turbopack-dev-v15", version=15).to_dict()
        {'example_id': 'turbopack-dev-v15', 'version': 15}
    """

    example_id: str | None = None
    category_id: str | None = None
    version: int | None = None
    language: str | None = None
    template: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["example_id", "category_id", "version", "language", "template"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class PatternDiffError(Exception):
    """
    Base exception for all patterndiff errors.

    Subclasses set ``default_category``; instances carry a message, a
    category, an :class:`ErrorContext` and an optional chained cause.

    Examples:
        >>> error = PatternDiffError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>
        >>> error.to_dict()["error_type"]
        'PatternDiffError'
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> PatternDiffError:
        """
        Add context to this error (fluent API).

        Usage:
            raise CatalogIntegrityError("Unknown category").with_context(
                example_id="form-component-v15",
                category_id="forms",
            )
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# VALIDATION ERRORS
# =============================================================================


class ValidationError(PatternDiffError):
    """Caller supplied a value outside the accepted domain."""

    default_category = ErrorCategory.VALIDATION

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        if self.value is not None:
            result["value"] = repr(self.value)
        return result


class InvalidVersionError(ValidationError):
    """Version tag is not one of the supported versions."""

    def __init__(self, value: Any, message: str | None = None):
        from patterndiff.catalog.models import SUPPORTED_VERSIONS

        supported = ", ".join(str(v) for v in SUPPORTED_VERSIONS)
        super().__init__(
            message or f"Unsupported version {value!r} (expected one of: {supported})",
            field="version",
            value=value,
        )


# =============================================================================
# CONTENT / INFRASTRUCTURE ERRORS
# =============================================================================


class CatalogIntegrityError(PatternDiffError):
    """
    The static tables are structurally broken.

    Raised when the store is built, never during a query.
    """

    default_category = ErrorCategory.INTEGRITY


class HighlightError(PatternDiffError):
    """Highlighting engine could not process a snippet."""

    default_category = ErrorCategory.HIGHLIGHT


class RenderError(PatternDiffError):
    """A page template failed to render."""

    default_category = ErrorCategory.RENDER


class ConfigError(PatternDiffError):
    """Configuration value is missing or invalid."""

    default_category = ErrorCategory.CONFIG


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "PatternDiffError",
    "ValidationError",
    "InvalidVersionError",
    "CatalogIntegrityError",
    "HighlightError",
    "RenderError",
    "ConfigError",
]
