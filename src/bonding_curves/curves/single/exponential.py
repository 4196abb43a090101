from dataclasses import dataclass

from bonding_curves.common.enums import BondingCurveType
from bonding_curves.common.math import safe_exp
from bonding_curves.curves.helpers.common import CommonCurveHelper as common_helper
from bonding_curves.curves.single.base import LossyBondingCurve


@dataclass(frozen=True)
class ExponentialBondingCurve(LossyBondingCurve):
    """
    A bonding curve where the price function is modeled as:
        price(s) = a * e^(b * s)

    ``a`` scales the curve (the price at zero supply) and ``b`` is the growth
    rate: positive grows, negative decays. The calculation is lossy because it
    relies on a float exponential. An exponent too large for a double yields
    inf; callers needing bounded prices clamp externally.
    """
    a: float
    b: float

    curve_type = BondingCurveType.EXPONENTIAL

    def __post_init__(self):
        object.__setattr__(self, "a", common_helper.validate_float_param(self.a, "a"))
        object.__setattr__(self, "b", common_helper.validate_float_param(self.b, "b"))

    def calculate_price_lossy(self, supply: int) -> float:
        supply = common_helper.validate_supply(supply)
        return self.a * safe_exp(self.b * supply)
