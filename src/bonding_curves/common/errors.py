"""
Exception hierarchy for curve evaluation.

Every failure is local to the call that raised it. Each class also derives from
the closest built-in exception so callers can catch either the library type or
the standard one (``OverflowError``, ``ZeroDivisionError``, ``ValueError``).
"""
from typing import Any, Dict, Optional


class BondingCurveError(Exception):
    """Base class for all errors raised by this library."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}


class ArithmeticOverflowError(BondingCurveError, OverflowError):
    """An integer result or intermediate left its representable range."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 limit: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.limit = limit


class DivisionByZeroError(BondingCurveError, ZeroDivisionError):
    """A checked division was asked to divide by zero."""


class DomainError(BondingCurveError, ValueError):
    """A value is outside the domain of a conversion (negative, NaN or infinite)."""

    def __init__(self, message: str, value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.value = value


class InvalidParameterError(BondingCurveError, ValueError):
    """A curve parameter does not satisfy its type constraint."""

    def __init__(self, message: str, parameter: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.parameter = parameter


class InvalidSupplyError(BondingCurveError, ValueError):
    """A supply value, or a supply window for range pricing, is invalid."""
