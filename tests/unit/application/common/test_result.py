"""Tests for the Result type."""

import pytest

from pointpath.application.common.result import Failure, Success
from pointpath.application.editor.use_cases.restore_selection_use_case import RestoreError


class TestResult:
    """Test suite for Success and Failure."""

    def test_success(self) -> None:
        result = Success(3)
        assert result.is_success
        assert not result.is_failure
        assert result.unwrap() == 3
        with pytest.raises(ValueError):
            result.unwrap_error()

    def test_failure(self) -> None:
        result = Failure(RestoreError.OUT_OF_RANGE)
        assert result.is_failure
        assert not result.is_success
        assert result.unwrap_error() is RestoreError.OUT_OF_RANGE
        with pytest.raises(ValueError):
            result.unwrap()

    def test_only_the_used_combinators_exist(self) -> None:
        for name in ("value_or", "map"):
            assert not hasattr(Success, name)
            assert not hasattr(Failure, name)
