import pytest

from bonding_curves.common.constants import U128_MAX
from bonding_curves.common.enums import OperationSide
from bonding_curves.common.errors import InvalidParameterError, InvalidSupplyError
from bonding_curves.curves.helpers.common import CommonCurveHelper


class TestValidateSupply:
    @pytest.mark.parametrize("supply", [0, 1, 10 ** 9, U128_MAX])
    def test_valid(self, supply):
        assert CommonCurveHelper.validate_supply(supply) == supply

    @pytest.mark.parametrize("supply", [-1, U128_MAX + 1, 1.0, "5", None, True])
    def test_invalid(self, supply):
        with pytest.raises(InvalidSupplyError):
            CommonCurveHelper.validate_supply(supply)


class TestValidateParams:
    def test_u128_param(self):
        assert CommonCurveHelper.validate_u128_param(7, "a") == 7

    @pytest.mark.parametrize("value", [-1, U128_MAX + 1, 0.5, False, "1"])
    def test_u128_param_invalid(self, value):
        with pytest.raises(InvalidParameterError) as exc_info:
            CommonCurveHelper.validate_u128_param(value, "a")
        assert exc_info.value.parameter == "a"

    def test_float_param(self):
        value = CommonCurveHelper.validate_float_param(3, "k")
        assert value == 3.0
        assert isinstance(value, float)

    @pytest.mark.parametrize("value", ["1.0", None, True])
    def test_float_param_invalid(self, value):
        with pytest.raises(InvalidParameterError):
            CommonCurveHelper.validate_float_param(value, "k")


class TestSupplyWindow:
    @pytest.mark.parametrize(
        "starting_supply, amount, side, expected",
        [
            (0, 0, OperationSide.ADD, (0, 0)),
            (0, 5, OperationSide.ADD, (0, 5)),
            (100, 10, OperationSide.ADD, (100, 110)),
            (100, 10, OperationSide.REMOVE, (90, 100)),
            (10, 10, OperationSide.REMOVE, (0, 10)),
            (U128_MAX, 1, OperationSide.ADD, (U128_MAX, U128_MAX + 1)),
        ]
    )
    def test_window(self, starting_supply, amount, side, expected):
        assert CommonCurveHelper.supply_window(starting_supply, amount, side) == expected

    def test_remove_more_than_supply(self):
        with pytest.raises(InvalidSupplyError, match="Cannot remove more tokens"):
            CommonCurveHelper.supply_window(5, 6, OperationSide.REMOVE)

    def test_add_past_range(self):
        with pytest.raises(InvalidSupplyError):
            CommonCurveHelper.supply_window(U128_MAX, 2, OperationSide.ADD)

    def test_unknown_side(self):
        with pytest.raises(InvalidSupplyError):
            CommonCurveHelper.supply_window(5, 1, "ADD")


@pytest.mark.parametrize("n", [0, 1, 2, 3, 10, 1001])
def test_power_sums(n):
    assert CommonCurveHelper.sum_of_integers(n) == sum(range(n))
    assert CommonCurveHelper.sum_of_squares(n) == sum(s * s for s in range(n))
