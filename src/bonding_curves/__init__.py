"""
Closed-form bonding curves: supply in, price out.

Linear and Quadratic curves price in exact fixed-point integers (scale 10^9)
and raise on overflow. Exponential, Logarithmic and Sigmoid curves price in
floats (``calculate_price_lossy``) and derive their fixed-point prices from it.
"""
from bonding_curves.common.constants import DECIMALS, SCALE, U128_MAX
from bonding_curves.common.enums import BondingCurveType, OperationSide, PriceMode
from bonding_curves.common.errors import (
    ArithmeticOverflowError,
    BondingCurveError,
    DivisionByZeroError,
    DomainError,
    InvalidParameterError,
    InvalidSupplyError,
)
from bonding_curves.common.fixed_point import fixed_point_to_float, float_to_fixed_point
from bonding_curves.common.model import BondingCurveConfig
from bonding_curves.curves.factory import create_bonding_curve, curve_to_config
from bonding_curves.curves.single.base import BondingCurve, IntegerBondingCurve, LossyBondingCurve
from bonding_curves.curves.single.exponential import ExponentialBondingCurve
from bonding_curves.curves.single.linear import LinearBondingCurve
from bonding_curves.curves.single.logarithmic import LogarithmicBondingCurve
from bonding_curves.curves.single.quadratic import QuadraticBondingCurve
from bonding_curves.curves.single.sigmoid import SigmoidBondingCurve
from bonding_curves.validation.safety_validator import CurveSafetyValidator

__all__ = [
    "DECIMALS",
    "SCALE",
    "U128_MAX",
    "BondingCurveType",
    "OperationSide",
    "PriceMode",
    "ArithmeticOverflowError",
    "BondingCurveError",
    "DivisionByZeroError",
    "DomainError",
    "InvalidParameterError",
    "InvalidSupplyError",
    "fixed_point_to_float",
    "float_to_fixed_point",
    "BondingCurveConfig",
    "create_bonding_curve",
    "curve_to_config",
    "BondingCurve",
    "IntegerBondingCurve",
    "LossyBondingCurve",
    "ExponentialBondingCurve",
    "LinearBondingCurve",
    "LogarithmicBondingCurve",
    "QuadraticBondingCurve",
    "SigmoidBondingCurve",
    "CurveSafetyValidator",
]
