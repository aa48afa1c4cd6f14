"""
NumberValue: immutable, string-backed decimal number.

- Construction accepts a closed set of inputs: int, float, str or NumberValue.
- The stored string keeps user-given trailing zeros ("1.50"); rendering strips them.
- Arithmetic goes through a Calculator (injected per value, or the registry
  default) and always returns a new NumberValue; the receiver is never modified.
- Operations take zero, one or many operands: zero is the identity, one is a
  single calculator call, many is a left fold in the given order.

Sign semantics follow the stored text: "-0" is negative-signed and zero-valued
at the same time (is_negative() and is_zero() both hold).
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional, Tuple, Union

from .core.calculator import Calculator
from .core.constants import NUMBER_PATTERN
from .core.exc import (
    NonIterableArgumentError,
    ParseError,
    UnsupportedTypeError,
)
from .core.registry import default_calculator
from .core.text import clean_number_text

_OPERATIONS = ("add", "subtract", "multiply", "divide")


def _is_number_like(value: object) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float, str, NumberValue))


@dataclass(frozen=True, eq=False)
class NumberValue:
    """Decimal number stored as validated text.

    `calculator` is the arithmetic backend handle; None means the shared default.
    It is inherited by every value derived from this one.
    """

    number: str
    calculator: Optional[Calculator] = field(default=None, repr=False)

    def __post_init__(self):
        if not isinstance(self.number, str):
            raise UnsupportedTypeError(self.number)
        if NUMBER_PATTERN.fullmatch(self.number) is None:
            raise ParseError(self.number)

    # ------------- constructors -------------

    @classmethod
    def of(cls, value: "NumberLike", *, calculator: Optional[Calculator] = None) -> "NumberValue":
        """Build a NumberValue from an int, float, str or another NumberValue.

        A NumberValue is copied by value and keeps its calculator unless
        `calculator` is given. Any other input kind raises UnsupportedTypeError.
        """
        if isinstance(value, NumberValue):
            return cls(value.number, calculator if calculator is not None else value.calculator)
        if isinstance(value, bool):
            raise UnsupportedTypeError(value)
        if isinstance(value, int):
            return cls.from_int(value, calculator=calculator)
        if isinstance(value, float):
            return cls.from_float(value, calculator=calculator)
        if isinstance(value, str):
            return cls.from_string(value, calculator=calculator)
        raise UnsupportedTypeError(value)

    @classmethod
    def from_int(cls, value: int, *, calculator: Optional[Calculator] = None) -> "NumberValue":
        if isinstance(value, bool) or not isinstance(value, int):
            raise UnsupportedTypeError(value)
        return cls(str(value), calculator)

    @classmethod
    def from_float(cls, value: float, *, calculator: Optional[Calculator] = None) -> "NumberValue":
        """Shortest round-trip text of `value`, always in plain notation (1e-05 -> '0.00001')."""
        if not isinstance(value, float):
            raise UnsupportedTypeError(value)
        if math.isnan(value) or math.isinf(value):
            raise ParseError(value, "not a finite float")
        return cls(format(Decimal(repr(value)), "f"), calculator)

    @classmethod
    def from_string(cls, value: str, *, calculator: Optional[Calculator] = None) -> "NumberValue":
        if not isinstance(value, str):
            raise UnsupportedTypeError(value)
        text = clean_number_text(value)
        if NUMBER_PATTERN.fullmatch(text) is None:
            raise ParseError(value)
        return cls(text, calculator)

    @classmethod
    def sum(cls, first: "NumberLike" = 0, *numbers: "NumberLike",
            calculator: Optional[Calculator] = None) -> "NumberValue":
        """Sum of all arguments; sum() is 0."""
        return cls.of(first, calculator=calculator).add(*numbers)

    @classmethod
    def avg(cls, first: "NumberLike" = 0, *numbers: "NumberLike",
            calculator: Optional[Calculator] = None) -> "NumberValue":
        """Arithmetic mean of all arguments; avg() is 0, not a division by zero."""
        return cls.sum(first, *numbers, calculator=calculator).divide(len(numbers) + 1)

    # ------------- backend plumbing -------------

    def _calc(self) -> Calculator:
        if self.calculator is not None:
            return self.calculator
        return default_calculator()

    def _compare(self, other: "NumberLike") -> int:
        # Always this value's calculator, whatever `other` carries.
        operand = self.of(other)
        return self._calc().compare(self.to_string(), operand.to_string())

    def _apply(self, operation: str, operand: "NumberLike") -> "NumberValue":
        other = self.of(operand)
        result = getattr(self._calc(), operation)(self.to_string(), other.to_string())
        return type(self).from_string(result, calculator=self.calculator)

    def _dispatch(self, operation: str, operands: Tuple["NumberLike", ...]) -> "NumberValue":
        if not operands:
            return self.of(self)
        if len(operands) == 1:
            return self._apply(operation, operands[0])
        return self.fold(operation, operands)

    # ------------- arithmetic -------------

    def fold(self, operation: str, operands: Iterable) -> "NumberValue":
        """Left-fold `operation` over a collection of operands.

        `operation` is one of 'add', 'subtract', 'multiply', 'divide'. A scalar
        (or a bare string) in place of the collection raises NonIterableArgumentError.
        """
        if operation not in _OPERATIONS:
            raise ValueError(f"unknown operation {operation!r}; expected one of {_OPERATIONS}")
        if isinstance(operands, (str, bytes)) or not isinstance(operands, Iterable):
            raise NonIterableArgumentError(operation, type(self).__name__)
        value = self.of(self)
        for operand in operands:
            value = value._apply(operation, operand)
        return value

    def add(self, *addends: "NumberLike") -> "NumberValue":
        return self._dispatch("add", addends)

    def subtract(self, *subtrahends: "NumberLike") -> "NumberValue":
        return self._dispatch("subtract", subtrahends)

    def multiply(self, *multipliers: "NumberLike") -> "NumberValue":
        return self._dispatch("multiply", multipliers)

    def divide(self, *divisors: "NumberLike") -> "NumberValue":
        """Divide by each divisor in turn: of(1).divide(2, 4) is (1 / 2) / 4."""
        return self._dispatch("divide", divisors)

    # ------------- comparisons -------------

    def equals(self, number: "NumberLike") -> bool:
        return self._compare(number) == 0

    def not_equals(self, number: "NumberLike") -> bool:
        return not self.equals(number)

    def larger_than(self, number: "NumberLike") -> bool:
        return self._compare(number) > 0

    def larger_than_or_equal(self, number: "NumberLike") -> bool:
        return self._compare(number) >= 0

    def less_than(self, number: "NumberLike") -> bool:
        return self._compare(number) < 0

    def less_than_or_equal(self, number: "NumberLike") -> bool:
        return self._compare(number) <= 0

    # ------------- sign -------------

    def is_negative(self) -> bool:
        """True iff the stored text carries a '-' (so '-0' counts as negative)."""
        return self.number[0] == "-"

    def is_positive(self) -> bool:
        return not self.is_negative()

    def is_zero(self) -> bool:
        return self.equals(0)

    def negate(self) -> "NumberValue":
        return self.multiply(-1)

    def to_positive(self) -> "NumberValue":
        if self.is_negative():
            return self.negate()
        return self.of(self)

    def to_negative(self) -> "NumberValue":
        if self.is_positive():
            return self.negate()
        return self.of(self)

    # ------------- conversions -------------

    def split(self) -> Tuple[str, str]:
        """Return (integer, fractional) with trailing zeros stripped from the fraction."""
        integer, _, fractional = self.number.partition(".")
        return integer, fractional.rstrip("0")

    def is_int(self) -> bool:
        _, fractional = self.split()
        return not fractional

    def is_float(self) -> bool:
        return not self.is_int()

    def to_int(self) -> int:
        """Integer part, truncated toward zero."""
        integer, _ = self.split()
        return int(integer)

    def to_float(self) -> float:
        return float(self.number)

    def to_string(self) -> str:
        integer, fractional = self.split()
        if not fractional:
            return integer
        return f"{integer}.{fractional}"

    # ------------- Python protocols -------------

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.number!r})"

    def __int__(self) -> int:
        return self.to_int()

    def __float__(self) -> float:
        return self.to_float()

    def __hash__(self) -> int:
        # Decimal hashes like int/float of the same value, so {1, of(1)} has one element.
        return hash(Decimal(self._calc().add(self.to_string(), "0")))

    def __eq__(self, other: object) -> bool:
        """Numeric equality at the precision of this value's calculator.

        Non-numeric strings compare unequal instead of raising. When both sides
        carry calculators of different precision the left operand decides, so
        `a == b` and `b == a` can differ.
        """
        if not _is_number_like(other):
            return NotImplemented
        try:
            return self.equals(other)
        except ParseError:
            return NotImplemented

    def __lt__(self, other: "NumberLike") -> bool:
        if not _is_number_like(other):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other: "NumberLike") -> bool:
        if not _is_number_like(other):
            return NotImplemented
        return self.less_than_or_equal(other)

    def __gt__(self, other: "NumberLike") -> bool:
        if not _is_number_like(other):
            return NotImplemented
        return self.larger_than(other)

    def __ge__(self, other: "NumberLike") -> bool:
        if not _is_number_like(other):
            return NotImplemented
        return self.larger_than_or_equal(other)

    def __add__(self, other: "NumberLike") -> "NumberValue":
        if not _is_number_like(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: "NumberLike") -> "NumberValue":
        if not _is_number_like(other):
            return NotImplemented
        return self.of(other, calculator=self.calculator).add(self)

    def __sub__(self, other: "NumberLike") -> "NumberValue":
        if not _is_number_like(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: "NumberLike") -> "NumberValue":
        if not _is_number_like(other):
            return NotImplemented
        return self.of(other, calculator=self.calculator).subtract(self)

    def __mul__(self, other: "NumberLike") -> "NumberValue":
        if not _is_number_like(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: "NumberLike") -> "NumberValue":
        if not _is_number_like(other):
            return NotImplemented
        return self.of(other, calculator=self.calculator).multiply(self)

    def __truediv__(self, other: "NumberLike") -> "NumberValue":
        if not _is_number_like(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: "NumberLike") -> "NumberValue":
        if not _is_number_like(other):
            return NotImplemented
        return self.of(other, calculator=self.calculator).divide(self)

    def __neg__(self) -> "NumberValue":
        return self.negate()

    def __abs__(self) -> "NumberValue":
        return self.to_positive()


# Closed set of inputs accepted by NumberValue.of
NumberLike = Union[int, float, str, NumberValue]


__all__ = [
    "NumberValue",
    "NumberLike",
]
