"""
Result envelope for explicit success/failure handling.

A typed ``Result[T]`` (``Ok[T] | Err[T]``) used where a failure is an
expected outcome that must be recovered locally rather than raised. The
highlight adapter is the main user: the engine call yields a ``Result`` and
the adapter folds an ``Err`` into fallback markup, so no engine exception
ever reaches a page renderer.

Examples:
    >>> from patterndiff.core.result import Ok, Err, try_result
    >>> try_result(lambda: int("42"))
    Ok(42)
    >>> try_result(lambda: int("forty-two")).is_err()
    True
    >>> Err(ValueError("boom")).unwrap_or("fallback")
    'fallback'

    Pattern matching:

    >>> match Ok("<span>x</span>"):
    ...     case Ok(value):
    ...         print(value)
    ...     case Err(error):
    ...         print("failed")
    <span>x</span>

Guardrails:
    ❌ DON'T: Use unwrap() without checking is_ok() first
    ✅ DO: Use unwrap_or_else() or pattern matching for safe extraction

Tags:
    result-pattern, error-handling, patterndiff
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from patterndiff.core.errors import PatternDiffError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, f: Callable[[Exception], T]) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Result[U]:
        """Transform the value."""
        return Ok(f(self.value))

    def map_err(self, f: Callable[[Exception], Exception]) -> Result[T]:
        """No-op for Ok."""
        return self

    def flat_map(self, f: Callable[[T], Result[U]]) -> Result[U]:
        """Chain a Result-returning function."""
        return f(self.value)

    def inspect_err(self, f: Callable[[Exception], None]) -> Result[T]:
        """No-op for Ok."""
        return self

    def to_dict(self) -> dict[str, Any]:
        return {"ok": True, "value": self.value}

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[T]):
    """
    Failed result containing an error.

    ``map`` and ``flat_map`` pass the error through unchanged; recovery
    happens through ``unwrap_or`` / ``unwrap_or_else``.
    """

    error: Exception

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Raise the error. Use only when you're sure it's Ok."""
        raise self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, f: Callable[[Exception], T]) -> T:
        """Call f with error to get value."""
        return f(self.error)

    def map(self, f: Callable[[T], U]) -> Result[U]:
        """No-op for Err."""
        return Err(self.error)

    def map_err(self, f: Callable[[Exception], Exception]) -> Result[T]:
        """Transform the error."""
        return Err(f(self.error))

    def flat_map(self, f: Callable[[T], Result[U]]) -> Result[U]:
        """No-op for Err."""
        return Err(self.error)

    def inspect_err(self, f: Callable[[Exception], None]) -> Result[T]:
        """Call f with error for side effects, return self."""
        f(self.error)
        return self

    def to_dict(self) -> dict[str, Any]:
        if isinstance(self.error, PatternDiffError):
            return {"ok": False, "error": self.error.to_dict()}
        return {
            "ok": False,
            "error": {
                "error_type": type(self.error).__name__,
                "message": str(self.error),
            },
        }

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Ok[T] | Err[T]


def try_result(f: Callable[[], T]) -> Result[T]:
    """
    Execute a zero-argument callable and wrap the outcome.

    The bridge between exception-throwing third-party code and
    Result-based code: returns ``Ok(value)`` or ``Err(exception)``.
    """
    try:
        return Ok(f())
    except Exception as e:
        return Err(e)


def try_result_with(
    f: Callable[[], T],
    error_mapper: Callable[[Exception], Exception],
) -> Result[T]:
    """Like :func:`try_result`, mapping any raised exception through ``error_mapper``."""
    try:
        return Ok(f())
    except Exception as e:
        return Err(error_mapper(e))


__all__ = [
    "Ok",
    "Err",
    "Result",
    "try_result",
    "try_result_with",
]
