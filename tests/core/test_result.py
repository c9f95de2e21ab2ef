"""Tests for patterndiff.core.result module."""

import pytest

from patterndiff.core.errors import HighlightError
from patterndiff.core.result import Err, Ok, try_result, try_result_with


class TestOk:
    """Test the success variant."""

    def test_basic_accessors(self):
        result = Ok(42)
        assert result.is_ok()
        assert not result.is_err()
        assert result.unwrap() == 42
        assert result.unwrap_or(0) == 42
        assert result.unwrap_or_else(lambda e: 0) == 42

    def test_map_and_flat_map(self):
        assert Ok(2).map(lambda v: v * 3) == Ok(6)
        assert Ok(2).flat_map(lambda v: Err(ValueError(str(v)))).is_err()

    def test_error_transformers_are_noops(self):
        result = Ok("x")
        assert result.map_err(lambda e: RuntimeError()) is result
        assert result.inspect_err(lambda e: pytest.fail("not called")) is result

    def test_to_dict_and_repr(self):
        assert Ok(1).to_dict() == {"ok": True, "value": 1}
        assert repr(Ok("a")) == "Ok('a')"


class TestErr:
    """Test the failure variant."""

    def test_unwrap_raises_error(self):
        with pytest.raises(ValueError, match="boom"):
            Err(ValueError("boom")).unwrap()

    def test_recovery(self):
        err = Err(ValueError("boom"))
        assert err.unwrap_or("fallback") == "fallback"
        assert err.unwrap_or_else(lambda e: f"recovered {e}") == "recovered boom"

    def test_map_passes_error_through(self):
        err = Err(ValueError("boom"))
        mapped = err.map(lambda v: v + 1)
        assert mapped.is_err()
        assert mapped.error is err.error

    def test_map_err_transforms(self):
        mapped = Err(ValueError("boom")).map_err(lambda e: RuntimeError(str(e)))
        assert isinstance(mapped.error, RuntimeError)

    def test_inspect_err_calls_function(self):
        seen = []
        err = Err(ValueError("boom"))
        assert err.inspect_err(seen.append) is err
        assert len(seen) == 1

    def test_to_dict_for_domain_error(self):
        d = Err(HighlightError("failed")).to_dict()
        assert d["ok"] is False
        assert d["error"]["category"] == "HIGHLIGHT"

    def test_to_dict_for_plain_exception(self):
        d = Err(KeyError("k")).to_dict()
        assert d["error"]["error_type"] == "KeyError"


class TestTryResult:
    """Test the exception-to-Result bridges."""

    def test_success(self):
        assert try_result(lambda: int("42")) == Ok(42)

    def test_failure(self):
        result = try_result(lambda: int("forty-two"))
        assert result.is_err()
        assert isinstance(result.error, ValueError)

    def test_error_mapper(self):
        result = try_result_with(
            lambda: int("x"),
            lambda exc: HighlightError("wrapped", cause=exc),
        )
        assert isinstance(result.error, HighlightError)
        assert isinstance(result.error.cause, ValueError)

    def test_pattern_matching(self):
        match try_result(lambda: "<span>x</span>"):
            case Ok(value):
                assert value == "<span>x</span>"
            case Err():
                pytest.fail("expected Ok")
