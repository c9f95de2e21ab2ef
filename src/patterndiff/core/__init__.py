"""patterndiff core -- errors, results, logging and settings.

Architecture::

    errors.py      Structured error hierarchy (PatternDiffError, InvalidVersionError)
    result.py      Result[T] envelope (Ok / Err / try_result)
    logging.py     structlog configuration + get_logger
    settings.py    PatternDiffSettings (pydantic-settings, PATTERNDIFF_ prefix)
"""

from patterndiff.core.errors import (
    CatalogIntegrityError,
    ConfigError,
    ErrorCategory,
    ErrorContext,
    HighlightError,
    InvalidVersionError,
    PatternDiffError,
    RenderError,
    ValidationError,
)
from patterndiff.core.result import Err, Ok, Result, try_result

__all__ = [
    "CatalogIntegrityError",
    "ConfigError",
    "ErrorCategory",
    "ErrorContext",
    "HighlightError",
    "InvalidVersionError",
    "PatternDiffError",
    "RenderError",
    "ValidationError",
    "Err",
    "Ok",
    "Result",
    "try_result",
]
