from dataclasses import dataclass

from bonding_curves.common.enums import BondingCurveType
from bonding_curves.common.math import safe_log1p
from bonding_curves.curves.helpers.common import CommonCurveHelper as common_helper
from bonding_curves.curves.single.base import LossyBondingCurve


@dataclass(frozen=True)
class LogarithmicBondingCurve(LossyBondingCurve):
    """
    price(s) = a * ln(b * s + 1)

    The +1 offset keeps price(0) == 0 instead of ln(0). With a negative ``b``
    the argument reaches zero (price -inf) and then goes negative (price nan);
    keeping b >= 0, or bounding supply, is up to the caller.
    """
    a: float
    b: float

    curve_type = BondingCurveType.LOGARITHMIC

    def __post_init__(self):
        object.__setattr__(self, "a", common_helper.validate_float_param(self.a, "a"))
        object.__setattr__(self, "b", common_helper.validate_float_param(self.b, "b"))

    def calculate_price_lossy(self, supply: int) -> float:
        supply = common_helper.validate_supply(supply)
        return self.a * safe_log1p(self.b * supply)
