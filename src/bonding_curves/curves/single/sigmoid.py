from dataclasses import dataclass

from bonding_curves.common.enums import BondingCurveType
from bonding_curves.common.math import safe_exp
from bonding_curves.curves.helpers.common import CommonCurveHelper as common_helper
from bonding_curves.curves.single.base import LossyBondingCurve


@dataclass(frozen=True)
class SigmoidBondingCurve(LossyBondingCurve):
    """
    A logistic bonding curve:

                  a
        price(s) = ---------------------
                  1 + e^(-k * (s - b))

    where:
      - a is the maximum price (upper asymptote)
      - k is the steepness of the transition
      - b is the supply at the inflection point, where price(b) == a / 2

    For k > 0 the price rises monotonically from near 0 towards a. When
    |k * (s - b)| is large the exponential overflows to inf or underflows to 0,
    so the price saturates to 0 or a instead of becoming nan.
    """
    a: float
    k: float
    b: float

    curve_type = BondingCurveType.SIGMOID

    def __post_init__(self):
        for name in ("a", "k", "b"):
            object.__setattr__(self, name, common_helper.validate_float_param(getattr(self, name), name))

    def calculate_price_lossy(self, supply: int) -> float:
        supply = common_helper.validate_supply(supply)
        return self.a / (1.0 + safe_exp(-self.k * (supply - self.b)))
