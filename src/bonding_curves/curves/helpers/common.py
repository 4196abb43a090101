from numbers import Integral, Real
from typing import Tuple

from bonding_curves.common.constants import U128_MAX
from bonding_curves.common.enums import OperationSide
from bonding_curves.common.errors import InvalidParameterError, InvalidSupplyError


class CommonCurveHelper:
    """
    Shared logic for every curve family:
      - Supply and parameter type checks
      - Supply windows for range pricing (ADD / REMOVE)
      - Closed-form power sums used by the integer curves
    """

    @staticmethod
    def validate_supply(supply: int, name: str = "supply") -> int:
        """
        Returns ``supply`` as an int if it is an integer in [0, U128_MAX].
        Raises InvalidSupplyError otherwise.
        """
        if isinstance(supply, bool) or not isinstance(supply, Integral):
            raise InvalidSupplyError(f"{name} must be an integer, got {supply!r}.")
        supply = int(supply)
        if supply < 0:
            raise InvalidSupplyError(f"{name} cannot be negative, got {supply}.")
        if supply > U128_MAX:
            raise InvalidSupplyError(f"{name} exceeds the unsigned 128-bit range.")
        return supply

    @staticmethod
    def validate_u128_param(value: int, name: str) -> int:
        """Integer curve parameters are unsigned 128-bit fixed-point integers."""
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise InvalidParameterError(f"'{name}' must be an integer, got {value!r}.", parameter=name)
        value = int(value)
        if value < 0 or value > U128_MAX:
            raise InvalidParameterError(
                f"'{name}' must be within [0, 2^128 - 1], got {value}.", parameter=name
            )
        return value

    @staticmethod
    def validate_float_param(value: float, name: str) -> float:
        """Lossy curve parameters are stored as floats; NaN and inf are accepted as-is."""
        if isinstance(value, bool) or not isinstance(value, Real):
            raise InvalidParameterError(f"'{name}' must be a real number, got {value!r}.", parameter=name)
        return float(value)

    @staticmethod
    def supply_window(starting_supply: int, amount: int, side: OperationSide) -> Tuple[int, int]:
        """
        Returns the half-open supply range [start, end) priced by a range operation:
          - ADD    => [starting_supply, starting_supply + amount)
          - REMOVE => [starting_supply - amount, starting_supply)
        """
        starting_supply = CommonCurveHelper.validate_supply(starting_supply, "starting_supply")
        amount = CommonCurveHelper.validate_supply(amount, "amount")

        if side == OperationSide.ADD:
            start, end = starting_supply, starting_supply + amount
            # the last priced unit must itself be a valid supply
            if end - 1 > U128_MAX:
                raise InvalidSupplyError("Adding amount would move supply past the unsigned 128-bit range.")
        elif side == OperationSide.REMOVE:
            if amount > starting_supply:
                raise InvalidSupplyError("Cannot remove more tokens than the current supply.")
            start, end = starting_supply - amount, starting_supply
        else:
            raise InvalidSupplyError(f"Unknown operation side {side!r}.")
        return start, end

    @staticmethod
    def sum_of_integers(n: int) -> int:
        """0 + 1 + ... + (n - 1)"""
        return n * (n - 1) // 2

    @staticmethod
    def sum_of_squares(n: int) -> int:
        """0^2 + 1^2 + ... + (n - 1)^2"""
        return (n - 1) * n * (2 * n - 1) // 6
