"""
tests/unit/test_core_threshold.py - Tests for EqualityThreshold and InequalityType.
"""

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from keen.core import EqualityThreshold, InequalityType
from keen.core.enums import _OPERATORS
from keen.errors import ErrorCode, ErrorCategory, InvalidThresholdError, Ok, Err


class TestEqualityThresholdCreate:
    """Tests for the non-raising validating factory."""

    @given(st.floats(min_value=0.0, allow_nan=False, allow_infinity=False))
    def test_non_negative_finite_values_succeed(self, x):
        result = EqualityThreshold.create(x)
        assert isinstance(result, Ok)
        assert result.value.value == x

    def test_nan_fails(self):
        result = EqualityThreshold.create(math.nan)
        assert isinstance(result, Err)
        assert str(result.error) == "Threshold should not be NaN, but was nan"
        assert result.error.code == ErrorCode.THR_NAN

    @pytest.mark.parametrize("value", [math.inf, -math.inf])
    def test_infinite_fails(self, value):
        result = EqualityThreshold.create(value)
        assert result.is_err
        assert str(result.error) == f"Threshold should be finite, but was {value}"
        assert result.error.code == ErrorCode.THR_INFINITE

    @given(st.floats(max_value=-1e-300, allow_nan=False, allow_infinity=False))
    def test_negative_fails(self, x):
        result = EqualityThreshold.create(x)
        assert result.is_err
        assert str(result.error) == f"Threshold should be non-negative, but was {x}"

    def test_error_is_typed(self):
        error = EqualityThreshold.create(-1.0).error
        assert isinstance(error, InvalidThresholdError)
        assert error.category == ErrorCategory.THRESHOLD
        assert error.threshold == -1.0
        assert error.to_dict()["code"] == ErrorCode.THR_NEGATIVE.value


class TestEqualityThresholdDirect:
    """Direct construction validates too."""

    def test_direct_construction_raises(self):
        with pytest.raises(InvalidThresholdError, match="non-negative"):
            EqualityThreshold(-0.5)

    def test_immutable(self):
        threshold = EqualityThreshold(0.1)
        with pytest.raises(AttributeError):
            threshold.value = 0.2

    def test_float_conversion(self):
        assert float(EqualityThreshold(0.25)) == 0.25

    def test_int_value_is_stored_as_float(self):
        threshold = EqualityThreshold(1)
        assert type(threshold.value) is float
        assert threshold.value == 1.0
        assert type(EqualityThreshold.create(0).unwrap().value) is float

    @pytest.mark.parametrize("factory, expected", [
        (EqualityThreshold.strict, 1e-9),
        (EqualityThreshold.relaxed, 1e-6),
        (EqualityThreshold.exact, 0.0),
        (EqualityThreshold.default, 1e-9),
    ])
    def test_presets(self, factory, expected):
        assert factory().value == expected


class TestInequalityType:
    """Tests for InequalityType."""

    @pytest.mark.parametrize("symbol, member", [
        ("<", InequalityType.LESS_THAN),
        (">", InequalityType.GREATER_THAN),
        ("<=", InequalityType.LESS_THAN_OR_EQUAL),
        (">=", InequalityType.GREATER_THAN_OR_EQUAL),
    ])
    def test_symbol(self, symbol, member):
        assert member.symbol == symbol

    def test_closed_enumeration(self):
        assert len(list(InequalityType)) == 4

    @pytest.mark.parametrize("member, lt, eq, gt", [
        (InequalityType.LESS_THAN, True, False, False),
        (InequalityType.GREATER_THAN, False, False, True),
        (InequalityType.LESS_THAN_OR_EQUAL, True, True, False),
        (InequalityType.GREATER_THAN_OR_EQUAL, False, True, True),
    ])
    def test_compare(self, member, lt, eq, gt):
        assert member.compare(1.0, 2.0) is lt
        assert member.compare(2.0, 2.0) is eq
        assert member.compare(3.0, 2.0) is gt

    def test_every_member_has_an_operator(self):
        assert set(_OPERATORS) == set(InequalityType)
