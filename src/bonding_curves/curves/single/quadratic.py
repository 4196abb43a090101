from dataclasses import dataclass

from bonding_curves.common.constants import U128_MAX
from bonding_curves.common.enums import BondingCurveType, OperationSide
from bonding_curves.common.math import checked_add, checked_mul, require_u128
from bonding_curves.curves.helpers.common import CommonCurveHelper as common_helper
from bonding_curves.curves.single.base import IntegerBondingCurve


@dataclass(frozen=True)
class QuadraticBondingCurve(IntegerBondingCurve):
    """
    A quadratic bonding curve priced in fixed-point integers:
        price(s) = a*s^2 + b*s + c

    where a, b and c are fixed-point prices (scale 10^9) and s is the raw unit
    supply. Every partial product and sum is checked against the unsigned
    128-bit range, so ``s^2`` can never wrap silently.
    """
    a: int
    b: int
    c: int

    curve_type = BondingCurveType.QUADRATIC

    def __post_init__(self):
        for name in ("a", "b", "c"):
            object.__setattr__(self, name, common_helper.validate_u128_param(getattr(self, name), name))

    def calculate_price(self, supply: int) -> int:
        supply = common_helper.validate_supply(supply)
        quadratic = checked_mul(checked_mul(self.a, supply), supply)
        linear = checked_mul(self.b, supply)
        return checked_add(checked_add(quadratic, linear), self.c)

    def calculate_price_many(self, starting_supply: int, amount: int, side: OperationSide) -> int:
        """
        Exact sum of calculate_price(s) over the window, using the closed forms
        of sum(s) and sum(s^2).
        """
        start, end = common_helper.supply_window(starting_supply, amount, side)
        n = end - start
        squares = common_helper.sum_of_squares(end) - common_helper.sum_of_squares(start)
        integers = common_helper.sum_of_integers(end) - common_helper.sum_of_integers(start)
        return require_u128(self.a * squares + self.b * integers + self.c * n, "calculate_price_many")

    def max_safe_supply(self) -> int:
        """Largest supply priced without overflow, found by bisection."""
        if self._price_fits(U128_MAX):
            return U128_MAX
        low, high = 0, U128_MAX
        # invariant: price(low) fits, price(high) does not
        while high - low > 1:
            mid = (low + high) // 2
            if self._price_fits(mid):
                low = mid
            else:
                high = mid
        return low

    def _price_fits(self, supply: int) -> bool:
        # all terms are non-negative, so a fitting total implies fitting partials
        return self.a * supply * supply + self.b * supply + self.c <= U128_MAX
