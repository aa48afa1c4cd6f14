# Top-level API for number_value.
"""
Top-level API for number_value.

  - NumberValue: immutable decimal number with zero/one/many-operand arithmetic
  - Calculator / FixedPointCalculator: pluggable fixed-precision backend
  - default_calculator / install_default_calculator: shared default backend

Everything else (text cleaning, operand parsing) stays under `number_value.core`.
"""

from __future__ import annotations

from .number import NumberValue, NumberLike

from .core import (
    Calculator,
    FixedPointCalculator,
    CalculatorRegistry,
    default_calculator,
    install_default_calculator,
    DEFAULT_PRECISION,
    ROUND_DOWN,
    ROUND_HALF_UP,
    NumberValueError,
    ParseError,
    UnsupportedTypeError,
    NonIterableArgumentError,
    DivisionByZeroError,
    RegistryFrozenError,
)

__version__ = "0.1.0"

__all__ = [
    "NumberValue",
    "NumberLike",
    # backend
    "Calculator",
    "FixedPointCalculator",
    "CalculatorRegistry",
    "default_calculator",
    "install_default_calculator",
    "DEFAULT_PRECISION",
    "ROUND_DOWN",
    "ROUND_HALF_UP",
    # errors
    "NumberValueError",
    "ParseError",
    "UnsupportedTypeError",
    "NonIterableArgumentError",
    "DivisionByZeroError",
    "RegistryFrozenError",
]
