import math
from numbers import Integral, Real

from bonding_curves.common.constants import DECIMALS
from bonding_curves.common.errors import ArithmeticOverflowError, DomainError
from bonding_curves.common.math import require_u128


def float_to_fixed_point(value: float, decimals: int = DECIMALS) -> int:
    """
    Converts a non-negative float to a fixed-point integer with ``decimals``
    fractional digits, rounding to the nearest integer.

    Negative, NaN and infinite values have no fixed-point representation and raise
    DomainError. Results above the unsigned 128-bit range raise
    ArithmeticOverflowError.

    >>> float_to_fixed_point(3.14159, 2)
    314
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise DomainError(f"Cannot convert {value!r} to fixed point.", value=value)
    value = float(value)
    if not math.isfinite(value):
        raise DomainError(f"Cannot convert non-finite value {value} to fixed point.", value=value)
    if value < 0:
        raise DomainError(f"Cannot convert negative value {value} to fixed point.", value=value)
    scaled = value * 10 ** decimals
    if math.isinf(scaled):
        raise ArithmeticOverflowError(
            f"{value} scaled by 10^{decimals} overflows a double.",
            operation="float_to_fixed_point",
        )
    return require_u128(round(scaled), "float_to_fixed_point")


def fixed_point_to_float(value: int, decimals: int = DECIMALS) -> float:
    """
    Converts a fixed-point integer with ``decimals`` fractional digits to a float.
    Large values lose precision beyond the 53-bit mantissa.

    >>> fixed_point_to_float(314, 2)
    3.14
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise DomainError(f"Fixed-point values must be integers, got {value!r}.", value=value)
    if value < 0:
        raise DomainError(f"Fixed-point values are unsigned, got {value}.", value=value)
    return int(value) / 10 ** decimals
