"""
Tests for the pyfinlinalg exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via FinLinalgError)
    - Diagnostic attributes on every exception that carries them
    - Default attribute values (None for optional attributes)
"""

import pytest

from pyfinlinalg.core.exceptions import (
    DimensionMismatchError,
    FinLinalgError,
    InvalidArgumentError,
    NumericalFailureError,
    SingularMatrixError,
    SingularSystemError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via FinLinalgError."""

    @pytest.mark.parametrize("exc", [
        ValidationError("bad input"),
        DimensionMismatchError("wrong shape"),
        InvalidArgumentError("bad k"),
        NumericalFailureError("failed"),
        SingularMatrixError("singular"),
        SingularSystemError("no svd"),
    ])
    def test_catchable_as_base(self, exc):
        with pytest.raises(FinLinalgError):
            raise exc

    def test_dimension_mismatch_is_validation_error(self):
        assert isinstance(DimensionMismatchError("x"), ValidationError)

    def test_invalid_argument_is_validation_error(self):
        assert isinstance(InvalidArgumentError("x"), ValidationError)

    def test_singular_matrix_is_numerical_failure(self):
        assert isinstance(SingularMatrixError("x"), NumericalFailureError)

    def test_singular_system_is_numerical_failure(self):
        assert isinstance(SingularSystemError("x"), NumericalFailureError)

    def test_validation_is_not_numerical(self):
        assert not isinstance(ValidationError("x"), NumericalFailureError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestAttributes:

    def test_dimension_mismatch_shapes(self):
        err = DimensionMismatchError("b too short", expected_shape=(3,), actual_shape=(2,))
        assert str(err) == "b too short"
        assert err.expected_shape == (3,)
        assert err.actual_shape == (2,)

    def test_dimension_mismatch_defaults(self):
        err = DimensionMismatchError("x")
        assert err.expected_shape is None
        assert err.actual_shape is None

    def test_invalid_argument(self):
        err = InvalidArgumentError("k out of range", argument="number_of_factors", value=0)
        assert err.argument == "number_of_factors"
        assert err.value == 0

    def test_singular_matrix(self):
        err = SingularMatrixError("singular", matrix_name="A", min_pivot=0.0, threshold=1e-11)
        assert err.matrix_name == "A"
        assert err.min_pivot == 0.0
        assert err.threshold == 1e-11
        assert err.operation == "lu"

    def test_singular_matrix_defaults(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.min_pivot is None
        assert err.threshold is None

    def test_singular_system(self):
        err = SingularSystemError("no svd", matrix_name="A")
        assert err.matrix_name == "A"
        assert err.operation == "svd"

    def test_numerical_failure_operation(self):
        assert NumericalFailureError("x", operation="eigen").operation == "eigen"
        assert NumericalFailureError("x").operation is None
