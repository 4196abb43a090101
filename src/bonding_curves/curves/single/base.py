import math
from abc import ABC, abstractmethod

from bonding_curves.common.enums import BondingCurveType, OperationSide, PriceMode
from bonding_curves.common.fixed_point import float_to_fixed_point
from bonding_curves.curves.helpers.common import CommonCurveHelper as common_helper
from bonding_curves.logging import get_logger

logger = get_logger(__name__)


class BondingCurve(ABC):
    """
    Abstract base class defining the interface of every bonding curve.

    Curves are immutable value objects: all calculations depend only on the curve
    parameters and the arguments, so one instance can be shared freely.
    """
    curve_type: BondingCurveType
    price_mode: PriceMode

    @abstractmethod
    def calculate_price(self, supply: int) -> int:
        """
        Returns the fixed-point price (scale 10^9) of one token at the given supply.

        :param supply: int - Current supply of tokens.
        :return: int: The price at given supply.
        """
        pass

    @abstractmethod
    def calculate_price_many(self, starting_supply: int, amount: int, side: OperationSide) -> int:
        """
        Returns the total fixed-point price of ``amount`` tokens added to (ADD) or
        removed from (REMOVE) a supply of ``starting_supply``.

        :param starting_supply: int - Supply before the operation.
        :param amount: int - Number of tokens to add or remove.
        :param side: OperationSide - ADD or REMOVE.
        :return: int: Sum of unit prices over the affected supply window.
        """
        pass


class IntegerBondingCurve(BondingCurve, ABC):
    """A curve priced with exact fixed-point integer arithmetic; overflow raises."""
    price_mode = PriceMode.FIXED_POINT

    @abstractmethod
    def max_safe_supply(self) -> int:
        """
        Returns the largest supply whose price fits an unsigned 128-bit integer.
        Every supply in [0, max_safe_supply()] is priced without overflow.
        """
        pass


class LossyBondingCurve(BondingCurve, ABC):
    """
    A curve whose formula needs a transcendental function and is therefore priced
    with floats. The fixed-point results of this class are derived from the float
    result and are lossy as well.
    """
    price_mode = PriceMode.LOSSY

    @abstractmethod
    def calculate_price_lossy(self, supply: int) -> float:
        """
        Returns the float price of one token at the given supply.
        Out-of-domain parameters yield inf or nan rather than raising.
        """
        pass

    def calculate_price(self, supply: int) -> int:
        """
        Lossy: the float price converted to fixed point.
        A non-finite or negative float price raises DomainError.
        """
        return float_to_fixed_point(self._log_if_non_finite(self.calculate_price_lossy(supply), supply))

    def calculate_price_many_lossy(self, starting_supply: int, amount: int, side: OperationSide) -> float:
        """
        Sums calculate_price_lossy over the supply window of the operation.
        Runs in O(amount).
        """
        start, end = common_helper.supply_window(starting_supply, amount, side)
        return sum((self.calculate_price_lossy(s) for s in range(start, end)), 0.0)

    def calculate_price_many(self, starting_supply: int, amount: int, side: OperationSide) -> int:
        """Lossy: calculate_price_many_lossy converted to fixed point."""
        total = self.calculate_price_many_lossy(starting_supply, amount, side)
        return float_to_fixed_point(self._log_if_non_finite(total, starting_supply))

    def _log_if_non_finite(self, price: float, supply: int) -> float:
        if not math.isfinite(price):
            logger.warning(
                "non_finite_price",
                curve_type=str(self.curve_type),
                supply=supply,
                price=price,
            )
        return price
