from enum import Enum


class BondingCurveType(Enum):
    LINEAR = "LINEAR"
    QUADRATIC = "QUADRATIC"
    EXPONENTIAL = "EXPONENTIAL"
    LOGARITHMIC = "LOGARITHMIC"
    SIGMOID = "SIGMOID"

    @classmethod
    def from_str(cls, type_str: str) -> "BondingCurveType":
        """
        Convert a string to a BondingCurveType enum, ignoring case and surrounding whitespace.
        :param type_str: str
        :return: BondingCurveType
        :raises NotImplementedError: if no curve type has that name
        """
        name = type_str.strip().upper()
        if name == BondingCurveType.LINEAR.name:
            return BondingCurveType.LINEAR
        elif name == BondingCurveType.QUADRATIC.name:
            return BondingCurveType.QUADRATIC
        elif name == BondingCurveType.EXPONENTIAL.name:
            return BondingCurveType.EXPONENTIAL
        elif name == BondingCurveType.LOGARITHMIC.name:
            return BondingCurveType.LOGARITHMIC
        elif name == BondingCurveType.SIGMOID.name:
            return BondingCurveType.SIGMOID
        else:
            raise NotImplementedError(f"No bonding curve type enum for {type_str}")

    def __hash__(self):
        return hash(self.value)

    def __str__(self):
        return self.name

    def __repr__(self):
        return self.__str__()


class OperationSide(Enum):
    """Direction of a range pricing operation: tokens added to or removed from supply."""
    ADD = "ADD"
    REMOVE = "REMOVE"

    @classmethod
    def from_str(cls, side_str: str) -> "OperationSide":
        if side_str.upper() == OperationSide.ADD.name:
            return OperationSide.ADD
        elif side_str.upper() == OperationSide.REMOVE.name:
            return OperationSide.REMOVE
        else:
            raise NotImplementedError(f"No operation side enum for {side_str}")

    def __str__(self):
        return self.name

    def __repr__(self):
        return self.__str__()


class PriceMode(Enum):
    """Arithmetic used to produce a price: exact fixed-point integers or lossy floats."""
    FIXED_POINT = "FIXED_POINT"
    LOSSY = "LOSSY"

    def __str__(self):
        return self.name

    def __repr__(self):
        return self.__str__()
