"""
Numeric safety layer.

Integer helpers emulate unsigned 128-bit arithmetic on top of Python's
unbounded ints: results are computed exactly and then checked, so a value that
would wrap in fixed-width arithmetic raises ``ArithmeticOverflowError`` instead.

Float helpers follow IEEE-754: they return ``inf``/``nan`` where ``math`` would
raise, so lossy prices surface as non-finite values rather than exceptions.
"""
import math

from bonding_curves.common.constants import U128_MAX, U256_MAX
from bonding_curves.common.errors import ArithmeticOverflowError, DivisionByZeroError
from bonding_curves.logging import get_logger

logger = get_logger(__name__)


def float_approx_equal(a: float, b: float, tol: float = 1e-9) -> bool:
    return abs(a - b) <= tol


def _require_range(value: int, limit: int, operation: str) -> int:
    if value < 0:
        logger.debug("arithmetic_underflow", operation=operation, value=value)
        raise ArithmeticOverflowError(
            f"{operation} underflowed below zero.", operation=operation, limit=0
        )
    if value > limit:
        logger.debug("arithmetic_overflow", operation=operation, limit=limit)
        raise ArithmeticOverflowError(
            f"{operation} overflowed the {limit.bit_length()}-bit range.",
            operation=operation,
            limit=limit,
        )
    return value


def require_u128(value: int, name: str = "value") -> int:
    """Return ``value`` if it fits an unsigned 128-bit integer, raise otherwise."""
    return _require_range(value, U128_MAX, name)


def require_u256(value: int, name: str = "value") -> int:
    """Return ``value`` if it fits an unsigned 256-bit integer, raise otherwise."""
    return _require_range(value, U256_MAX, name)


def checked_add(x: int, y: int) -> int:
    return _require_range(x + y, U128_MAX, "add")


def checked_sub(x: int, y: int) -> int:
    return _require_range(x - y, U128_MAX, "sub")


def checked_mul(x: int, y: int) -> int:
    return _require_range(x * y, U128_MAX, "mul")


def checked_div(x: int, y: int) -> int:
    """Floor division that raises ``DivisionByZeroError`` on a zero divisor."""
    if y == 0:
        raise DivisionByZeroError("A division by zero occurred during the operation.")
    return _require_range(x // y, U128_MAX, "div")


def mul_div_floor(x: int, y: int, d: int) -> int:
    """
    Computes floor(x * y / d) with a 256-bit intermediate product.

    The product may exceed 128 bits as long as it fits 256; only the quotient
    has to fit the 128-bit range.
    """
    if d == 0:
        raise DivisionByZeroError("A division by zero occurred during the operation.")
    product = _require_range(x * y, U256_MAX, "mul_div")
    return _require_range(product // d, U128_MAX, "mul_div")


def floor_sum(n: int, m: int, a: int, b: int) -> int:
    """
    Returns sum(floor((a*i + b) / m) for i in range(n)) for non-negative a, b,
    n and positive m, in O(log(max(a, m))) steps.
    """
    if m <= 0:
        raise DivisionByZeroError("floor_sum requires a positive modulus.")
    total = 0
    while True:
        if a >= m:
            total += n * (n - 1) // 2 * (a // m)
            a %= m
        if b >= m:
            total += n * (b // m)
            b %= m
        y_max = a * n + b
        if y_max < m:
            break
        n, b = divmod(y_max, m)
        m, a = a, m
    return total


def safe_exp(x: float) -> float:
    """math.exp, returning inf where the result overflows a double."""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def safe_log1p(x: float) -> float:
    """math.log1p, returning -inf at x == -1 and nan for x < -1."""
    if x == -1.0:
        return -math.inf
    if x < -1.0:
        return math.nan
    return math.log1p(x)
