import math
import sys
from typing import Any, Dict, List

from bonding_curves.common.constants import U128_MAX
from bonding_curves.common.fixed_point import fixed_point_to_float
from bonding_curves.curves.single.base import BondingCurve, IntegerBondingCurve
from bonding_curves.curves.single.exponential import ExponentialBondingCurve
from bonding_curves.curves.single.linear import LinearBondingCurve
from bonding_curves.curves.single.logarithmic import LogarithmicBondingCurve
from bonding_curves.curves.single.quadratic import QuadraticBondingCurve
from bonding_curves.curves.single.sigmoid import SigmoidBondingCurve
from bonding_curves.logging import get_logger

logger = get_logger(__name__)

_MAX_FLOAT_LOG = math.log(sys.float_info.max)


class CurveSafetyValidator:
    """
    Advisory arithmetic-safety report for a curve. Nothing here is enforced:
    curves accept any parameters of the right type, and this validator only
    tells the caller where overflow or non-finite prices begin.

    Reports have the shape {"errors": [...], "warnings": [...], "info": {...}}.
    """

    @staticmethod
    def validate(curve: BondingCurve) -> Dict[str, Any]:
        errors: List[str] = []
        warnings: List[str] = []
        info: Dict[str, Any] = {
            "curve_type": str(curve.curve_type),
            "price_mode": str(curve.price_mode),
        }

        if isinstance(curve, IntegerBondingCurve):
            info["max_safe_supply"] = curve.max_safe_supply()

        if isinstance(curve, LinearBondingCurve):
            if curve.linear == 0:
                warnings.append("LinearCurve: 'linear' is 0, the price is flat.")

        elif isinstance(curve, QuadraticBondingCurve):
            if curve.a == 0 and curve.b == 0:
                warnings.append("QuadraticCurve: 'a' and 'b' are 0, the price is flat.")

        elif isinstance(curve, ExponentialBondingCurve):
            CurveSafetyValidator._check_finite(curve, ("a", "b"), errors)
            if not errors:
                if curve.a <= 0:
                    warnings.append("ExponentialCurve: 'a' <= 0, prices have no fixed-point representation.")
                elif curve.b > 0:
                    # e^(b*s) itself overflows first when a < 1
                    headroom = _MAX_FLOAT_LOG - max(0.0, math.log(curve.a))
                    bound = headroom / curve.b
                    info["max_finite_supply"] = (
                        U128_MAX if math.isinf(bound) else CurveSafetyValidator._supply_bound(math.floor(bound))
                    )

        elif isinstance(curve, LogarithmicBondingCurve):
            CurveSafetyValidator._check_finite(curve, ("a", "b"), errors)
            if not errors:
                if curve.b < 0:
                    # b*s + 1 > 0  <=>  s < -1/b
                    bound = -1.0 / curve.b
                    info["max_finite_supply"] = (
                        U128_MAX if math.isinf(bound) else CurveSafetyValidator._supply_bound(math.ceil(bound) - 1)
                    )
                    warnings.append(
                        "LogarithmicCurve: 'b' < 0, prices become non-finite beyond "
                        f"supply {info['max_finite_supply']}."
                    )
                if curve.a < 0:
                    warnings.append("LogarithmicCurve: 'a' < 0, prices are negative.")

        elif isinstance(curve, SigmoidBondingCurve):
            CurveSafetyValidator._check_finite(curve, ("a", "k", "b"), errors)
            if not errors:
                if curve.k <= 0:
                    warnings.append("SigmoidCurve: 'k' <= 0, the price does not increase with supply.")
                if curve.a <= 0:
                    warnings.append("SigmoidCurve: 'a' <= 0, prices have no fixed-point representation.")

        if errors or warnings:
            logger.info(
                "curve_safety_findings",
                curve_type=str(curve.curve_type),
                errors=errors,
                warnings=warnings,
            )

        return {
            "errors": errors,
            "warnings": warnings,
            "info": info,
        }

    @staticmethod
    def boundary_tests(curve: BondingCurve) -> Dict[str, Any]:
        """
        Checks the zero-supply anchor of each family:
          - Linear => base, Quadratic => c (exactly)
          - Exponential => a, Logarithmic => 0 (within 1e-9)
          - Sigmoid => strictly between 0 and a
        """
        errors: List[str] = []
        warnings: List[str] = []
        info: Dict[str, Any] = {}

        if isinstance(curve, IntegerBondingCurve):
            price_at_zero = curve.calculate_price(0)
            info["price_at_zero"] = fixed_point_to_float(price_at_zero)
            expected = curve.base if isinstance(curve, LinearBondingCurve) else curve.c
            if price_at_zero != expected:
                errors.append(f"price(0) = {price_at_zero}, expected {expected}.")
        else:
            price_at_zero = curve.calculate_price_lossy(0)
            info["price_at_zero"] = price_at_zero
            if isinstance(curve, ExponentialBondingCurve):
                if not math.isclose(price_at_zero, curve.a, abs_tol=1e-9):
                    errors.append(f"price(0) = {price_at_zero}, expected {curve.a}.")
            elif isinstance(curve, LogarithmicBondingCurve):
                if not math.isclose(price_at_zero, 0.0, abs_tol=1e-9):
                    errors.append(f"price(0) = {price_at_zero}, expected 0.")
            elif isinstance(curve, SigmoidBondingCurve):
                if not 0.0 <= price_at_zero <= curve.a:
                    errors.append(f"price(0) = {price_at_zero} is outside [0, {curve.a}].")
                elif price_at_zero in (0.0, curve.a):
                    warnings.append("price(0) is saturated; the transition lies outside float precision.")

        return {
            "errors": errors,
            "warnings": warnings,
            "info": info,
        }

    @staticmethod
    def _supply_bound(value: int) -> int:
        """Clamps a supply limit to the valid supply range [0, U128_MAX]."""
        return min(max(0, value), U128_MAX)

    @staticmethod
    def _check_finite(curve: BondingCurve, names, errors: List[str]) -> None:
        for name in names:
            value = getattr(curve, name)
            if not math.isfinite(value):
                errors.append(f"{type(curve).__name__}: '{name}' must be finite, got {value}.")
