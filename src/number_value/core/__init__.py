"""
number_value Core
=================

Unified exports for the integer-domain calculator, its registry, the numeric
text cleaner and the error types. NumberValue itself lives one level up.
"""

# NOTE:
#   Calculators work on canonical decimal strings and integers only. Decimal is
#   used solely as an input bridge for floats (see NumberValue.from_float).

from .constants import (
    DEFAULT_PRECISION,
    DEFAULT_ROUNDING,
    ROUND_DOWN,
    ROUND_HALF_UP,
    ROUNDING_MODES,
    NUMBER_PATTERN,
    OPERAND_PATTERN,
)

from .text import (
    squish,
    strip_prefix,
    finish,
    clean_number_text,
)

from .calculator import (
    Calculator,
    FixedPointCalculator,
    parse_operand,
    format_fixed,
    env_flag,
)

from .registry import (
    CalculatorRegistry,
    calculator_from_env,
    default_calculator,
    install_default_calculator,
)

from .exc import (
    NumberValueError,
    ParseError,
    UnsupportedTypeError,
    NonIterableArgumentError,
    DivisionByZeroError,
    RegistryFrozenError,
)

__all__ = [
    # constants
    "DEFAULT_PRECISION",
    "DEFAULT_ROUNDING",
    "ROUND_DOWN",
    "ROUND_HALF_UP",
    "ROUNDING_MODES",
    "NUMBER_PATTERN",
    "OPERAND_PATTERN",
    # text
    "squish",
    "strip_prefix",
    "finish",
    "clean_number_text",
    # calculator
    "Calculator",
    "FixedPointCalculator",
    "parse_operand",
    "format_fixed",
    "env_flag",
    # registry
    "CalculatorRegistry",
    "calculator_from_env",
    "default_calculator",
    "install_default_calculator",
    # exceptions
    "NumberValueError",
    "ParseError",
    "UnsupportedTypeError",
    "NonIterableArgumentError",
    "DivisionByZeroError",
    "RegistryFrozenError",
]
