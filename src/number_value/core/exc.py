"""
Core exception types for number_value.core.

These are dependency-free and may be imported by all core modules.
Each error also derives from the closest built-in exception so callers can
catch either the domain type or the standard one.
"""

__all__ = [
    "NumberValueError",
    "ParseError",
    "UnsupportedTypeError",
    "NonIterableArgumentError",
    "DivisionByZeroError",
    "RegistryFrozenError",
]


class NumberValueError(Exception):
    """Base class for all number_value errors."""
    pass


class ParseError(NumberValueError, ValueError):
    """Raised when an input does not match the decimal number grammar."""

    def __init__(self, raw, reason: str = "not a number"):
        super().__init__(f"Cannot parse {raw!r} as a decimal number: {reason}")
        self.raw = raw


class UnsupportedTypeError(NumberValueError, TypeError):
    """Raised when a value of a kind with no conversion rule reaches `of()`.

    Attributes
    ----------
    type_name : str
        Runtime type name of the rejected input.
    """

    def __init__(self, value):
        self.type_name = type(value).__name__
        super().__init__(f"Unsupported number ({self.type_name}) type.")


class NonIterableArgumentError(NumberValueError, TypeError):
    """Raised when an aggregate reducer receives a scalar instead of a collection."""

    def __init__(self, method: str, cls: str):
        super().__init__(
            f"Method '{method}' of '{cls}' needs an iterable of operands; "
            f"pass scalars as separate positional arguments instead."
        )
        self.method = method
        self.cls = cls


class DivisionByZeroError(NumberValueError, ZeroDivisionError):
    """Raised when a calculator is asked to divide by a zero-valued operand."""

    def __init__(self, dividend: str, divisor: str):
        super().__init__(f"Division by zero: {dividend} / {divisor}")
        self.dividend = dividend
        self.divisor = divisor


class RegistryFrozenError(NumberValueError, RuntimeError):
    """Raised when a default calculator is installed after first use."""
    pass
