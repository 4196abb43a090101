import math

import pytest
from structlog.testing import capture_logs

from bonding_curves.common.enums import BondingCurveType, OperationSide, PriceMode
from bonding_curves.common.errors import DomainError, InvalidParameterError
from bonding_curves.common.fixed_point import fixed_point_to_float
from bonding_curves.curves.single.exponential import ExponentialBondingCurve


@pytest.fixture
def exponential_curve():
    return ExponentialBondingCurve(a=0.01, b=0.02)


def test_price_at_zero_is_a(exponential_curve):
    assert exponential_curve.calculate_price_lossy(0) == pytest.approx(0.01, abs=1e-9)


def test_calculate_price_lossy(exponential_curve):
    # 0.01 * e^2
    assert exponential_curve.calculate_price_lossy(100) == pytest.approx(0.073890560989306492, rel=1e-12)


def test_calculate_price_fixed_point(exponential_curve):
    assert exponential_curve.calculate_price(100) == 73_890_561
    assert exponential_curve.calculate_price(0) == 10_000_000


def test_fixed_point_parameters():
    """Parameters given as fixed-point integers convert to the same curve."""
    curve = ExponentialBondingCurve(a=fixed_point_to_float(1, 2), b=fixed_point_to_float(2, 2))
    assert curve == ExponentialBondingCurve(a=0.01, b=0.02)


def test_strictly_increasing_for_positive_growth(exponential_curve):
    prices = [exponential_curve.calculate_price_lossy(s) for s in range(0, 300)]
    assert all(later > earlier for earlier, later in zip(prices, prices[1:]))


def test_decay_for_negative_growth():
    curve = ExponentialBondingCurve(a=5.0, b=-0.5)
    prices = [curve.calculate_price_lossy(s) for s in range(0, 50)]
    assert all(later < earlier for earlier, later in zip(prices, prices[1:]))
    assert curve.calculate_price_lossy(10_000) == 0.0


def test_class_attributes(exponential_curve):
    assert exponential_curve.curve_type == BondingCurveType.EXPONENTIAL
    assert exponential_curve.price_mode == PriceMode.LOSSY


class TestNonFinite:
    def test_overflow_is_infinite(self):
        curve = ExponentialBondingCurve(a=1.0, b=1.0)
        assert curve.calculate_price_lossy(1000) == math.inf

    def test_fixed_point_of_infinite_price_raises(self):
        curve = ExponentialBondingCurve(a=1.0, b=1.0)
        with capture_logs() as logs:
            with pytest.raises(DomainError):
                curve.calculate_price(1000)
        assert logs[0]["event"] == "non_finite_price"
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["curve_type"] == "EXPONENTIAL"

    def test_negative_price_has_no_fixed_point(self):
        curve = ExponentialBondingCurve(a=-1.0, b=0.1)
        assert curve.calculate_price_lossy(3) < 0
        with pytest.raises(DomainError):
            curve.calculate_price(3)


class TestConstruction:
    def test_ints_are_stored_as_floats(self):
        curve = ExponentialBondingCurve(a=2, b=0)
        assert isinstance(curve.a, float)
        assert curve.calculate_price_lossy(12345) == 2.0

    @pytest.mark.parametrize("a, b", [("0.01", 0.02), (0.01, None)])
    def test_invalid_params(self, a, b):
        with pytest.raises(InvalidParameterError):
            ExponentialBondingCurve(a=a, b=b)


class TestCalculatePriceMany:
    def test_add_matches_sum_of_unit_prices(self, exponential_curve):
        expected = math.fsum(exponential_curve.calculate_price_lossy(s) for s in range(10, 60))
        result = exponential_curve.calculate_price_many_lossy(10, 50, OperationSide.ADD)
        assert result == pytest.approx(expected, rel=1e-12)

    def test_geometric_series(self, exponential_curve):
        """sum(a * e^(b*s), s < n) == a * (e^(b*n) - 1) / (e^b - 1)"""
        n = 200
        expected = 0.01 * math.expm1(0.02 * n) / math.expm1(0.02)
        result = exponential_curve.calculate_price_many_lossy(0, n, OperationSide.ADD)
        assert result == pytest.approx(expected, rel=1e-9)

    def test_add_then_remove_is_symmetric(self, exponential_curve):
        added = exponential_curve.calculate_price_many_lossy(5, 20, OperationSide.ADD)
        removed = exponential_curve.calculate_price_many_lossy(25, 20, OperationSide.REMOVE)
        assert added == removed

    def test_fixed_point_total(self, exponential_curve):
        total = exponential_curve.calculate_price_many_lossy(0, 3, OperationSide.ADD)
        assert exponential_curve.calculate_price_many(0, 3, OperationSide.ADD) == round(total * 10 ** 9)

    def test_zero_amount(self, exponential_curve):
        assert exponential_curve.calculate_price_many_lossy(100, 0, OperationSide.ADD) == 0.0
        assert exponential_curve.calculate_price_many(100, 0, OperationSide.REMOVE) == 0
