"""Tests for patterndiff.core.errors module."""

import pytest

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


class TestErrorContext:
    """Test ErrorContext dataclass."""

    def test_create_empty_context(self):
        """Create context with no fields set."""
        ctx = ErrorContext()
        assert ctx.example_id is None
        assert ctx.version is None
        assert ctx.metadata == {}
        assert ctx.to_dict() == {}

    def test_to_dict_excludes_none(self):
        """Only fields that are set are serialized."""
        ctx = ErrorContext(example_id="turbopack-dev-v15", version=15)
        assert ctx.to_dict() == {"example_id": "turbopack-dev-v15", "version": 15}

    def test_metadata_merged_into_dict(self):
        ctx = ErrorContext(category_id="routing", metadata={"page": "/15/"})
        assert ctx.to_dict() == {"category_id": "routing", "page": "/15/"}


class TestPatternDiffError:
    """Test the base error class."""

    def test_defaults_to_internal_category(self):
        error = PatternDiffError("Something went wrong")
        assert error.category == ErrorCategory.INTERNAL
        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"

    def test_explicit_category_overrides_default(self):
        error = PatternDiffError("x", category=ErrorCategory.RENDER)
        assert error.category == ErrorCategory.RENDER

    def test_with_context_sets_known_fields_and_metadata(self):
        """Known keys land on the context, unknown ones in metadata."""
        error = PatternDiffError("x").with_context(example_id="a", attempt=2)
        assert error.context.example_id == "a"
        assert error.context.metadata == {"attempt": 2}

    def test_with_context_is_fluent(self):
        error = CatalogIntegrityError("x")
        assert error.with_context(category_id="c") is error

    def test_cause_is_chained(self):
        cause = ValueError("boom")
        error = HighlightError("failed", cause=cause)
        assert error.cause is cause
        assert error.__cause__ is cause

    def test_to_dict(self):
        error = RenderError("bad template", cause=KeyError("k")).with_context(template="index.html.j2")
        d = error.to_dict()
        assert d["error_type"] == "RenderError"
        assert d["message"] == "bad template"
        assert d["category"] == "RENDER"
        assert d["context"] == {"template": "index.html.j2"}
        assert "cause" in d

    def test_repr(self):
        assert repr(ConfigError("nope")) == "ConfigError('nope', category=CONFIG)"


class TestSubclassCategories:
    """Each subclass carries its own default category."""

    @pytest.mark.parametrize(
        "cls,category",
        [
            (ValidationError, ErrorCategory.VALIDATION),
            (CatalogIntegrityError, ErrorCategory.INTEGRITY),
            (HighlightError, ErrorCategory.HIGHLIGHT),
            (RenderError, ErrorCategory.RENDER),
            (ConfigError, ErrorCategory.CONFIG),
        ],
    )
    def test_default_category(self, cls, category):
        assert cls("x").category == category

    def test_all_are_pattern_diff_errors(self):
        for cls in (ValidationError, CatalogIntegrityError, HighlightError, RenderError, ConfigError):
            assert issubclass(cls, PatternDiffError)


class TestInvalidVersionError:
    """Test the version rejection error."""

    def test_carries_rejected_value(self):
        error = InvalidVersionError(14)
        assert error.value == 14
        assert error.field == "version"
        assert error.category == ErrorCategory.VALIDATION

    def test_message_lists_supported_versions(self):
        assert "15, 16" in InvalidVersionError(17).message

    def test_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise InvalidVersionError("15")

    def test_to_dict_includes_value(self):
        d = InvalidVersionError(14).to_dict()
        assert d["field"] == "version"
        assert d["value"] == "14"
