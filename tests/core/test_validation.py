"""
Tests for input validation utilities.

Validates every function in core/validation.py.
"""

import numpy as np
import pytest

from pyfinlinalg.core.exceptions import (
    DimensionMismatchError,
    InvalidArgumentError,
    ValidationError,
)
from pyfinlinalg.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_non_empty,
    check_number_of_factors,
    check_square,
    is_finite,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "b")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_returns_copy(self):
        arr = np.array([[1.0, 2.0], [3.0, 4.0]])
        result = check_array(arr, "A")
        result[0, 0] = 99.0
        assert arr[0, 0] == 1.0

    def test_float32_promoted(self):
        result = check_array(np.array([1.0], dtype=np.float32), "b")
        assert result.dtype == np.float64

    def test_ragged_rejected(self):
        with pytest.raises(ValidationError):
            check_array([[1.0, 2.0], [3.0]], "A")

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="A"):
            check_array(["a", "b"], "A")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError):
            check_array(np.array([1 + 2j]), "A")


# ═══════════════════════════════════════════════════════════════════════
# Finiteness and shape
# ═══════════════════════════════════════════════════════════════════════


class TestFinite:

    def test_finite(self):
        assert is_finite(np.array([1.0, 2.0]))

    def test_nan_and_inf(self):
        assert not is_finite(np.array([np.nan, 1.0]))
        assert not is_finite(np.array([[1.0, np.inf]]))


class TestShape:

    def test_1d(self):
        check_1d(np.zeros(3), "b")
        with pytest.raises(DimensionMismatchError):
            check_1d(np.zeros((3, 1)), "b")

    def test_2d(self):
        check_2d(np.zeros((2, 3)), "A")
        with pytest.raises(DimensionMismatchError, match="expected 2D"):
            check_2d(np.zeros(3), "A")

    def test_non_empty(self):
        with pytest.raises(DimensionMismatchError):
            check_non_empty(np.zeros((0, 0)), "A")

    def test_square(self):
        check_square(np.zeros((3, 3)), "A")
        with pytest.raises(DimensionMismatchError) as exc_info:
            check_square(np.zeros((2, 3)), "A")
        assert exc_info.value.actual_shape == (2, 3)

    def test_consistent_length(self):
        check_consistent_length(np.zeros((3, 2)), np.zeros(3), names=("A", "b"))
        with pytest.raises(DimensionMismatchError, match="A=3, b=2"):
            check_consistent_length(np.zeros((3, 2)), np.zeros(2), names=("A", "b"))

    def test_consistent_length_names_mismatch(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(2), names=("a", "b"))


# ═══════════════════════════════════════════════════════════════════════
# check_number_of_factors
# ═══════════════════════════════════════════════════════════════════════


class TestNumberOfFactors:

    @pytest.mark.parametrize("k", [1, 3, 5, np.int64(2)])
    def test_in_range(self, k):
        assert check_number_of_factors(k, 5, "k") == int(k)

    @pytest.mark.parametrize("k", [0, -1, 6])
    def test_out_of_range(self, k):
        with pytest.raises(InvalidArgumentError) as exc_info:
            check_number_of_factors(k, 5, "number_of_factors")
        assert exc_info.value.argument == "number_of_factors"
        assert exc_info.value.value == k

    @pytest.mark.parametrize("k", [2.0, "2", None, True])
    def test_non_integer(self, k):
        with pytest.raises(InvalidArgumentError):
            check_number_of_factors(k, 5, "k")
