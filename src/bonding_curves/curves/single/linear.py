from dataclasses import dataclass

from bonding_curves.common.constants import SCALE, U128_MAX
from bonding_curves.common.enums import BondingCurveType, OperationSide
from bonding_curves.common.math import checked_add, checked_mul, floor_sum, mul_div_floor, require_u128
from bonding_curves.curves.helpers.common import CommonCurveHelper as common_helper
from bonding_curves.curves.single.base import IntegerBondingCurve


@dataclass(frozen=True)
class LinearBondingCurve(IntegerBondingCurve):
    """
    A linear bonding curve priced in fixed-point integers:
        price(s) = (linear * s) / SCALE + base

    where SCALE = 10^9, ``linear`` is the slope numerator and ``base`` the
    intercept. Supply is a fixed-point token amount, so one whole token is
    SCALE units of supply and adds exactly ``linear`` to the price.

    The product ``linear * s`` is formed in a 256-bit intermediate before the
    division; the final price must fit 128 bits.
    """
    linear: int
    base: int

    curve_type = BondingCurveType.LINEAR

    def __post_init__(self):
        object.__setattr__(self, "linear", common_helper.validate_u128_param(self.linear, "linear"))
        object.__setattr__(self, "base", common_helper.validate_u128_param(self.base, "base"))

    def calculate_price(self, supply: int) -> int:
        supply = common_helper.validate_supply(supply)
        return checked_add(mul_div_floor(self.linear, supply, SCALE), self.base)

    def calculate_price_many(self, starting_supply: int, amount: int, side: OperationSide) -> int:
        """
        Exact sum of calculate_price(s) over the window, in O(log) time:
            amount * base + sum(floor(linear * s / SCALE))
        """
        start, end = common_helper.supply_window(starting_supply, amount, side)
        n = end - start
        slope_total = floor_sum(n, SCALE, self.linear, self.linear * start)
        return require_u128(checked_mul(n, self.base) + slope_total, "calculate_price_many")

    def max_safe_supply(self) -> int:
        if self.linear == 0:
            return U128_MAX
        # floor(linear * s / SCALE) <= U128_MAX - base  <=>  linear * s < (U128_MAX - base + 1) * SCALE
        limit = ((U128_MAX - self.base + 1) * SCALE - 1) // self.linear
        return min(limit, U128_MAX)
