"""
number_value Core Constants
===========================

Precision/rounding defaults, the numeric grammars and the environment variable
names read when the default calculator is first built.
"""

# NOTE: precision counts digits right of the decimal point, not significant digits.

import re

# ---------------------------------------------------------------------------
# Fixed-point defaults
# ---------------------------------------------------------------------------

#: Fractional digits retained by the default calculator.
DEFAULT_PRECISION: int = 14

#: Truncation toward zero (matches classic fixed-scale decimal libraries).
ROUND_DOWN: str = "down"

#: Half away from zero.
ROUND_HALF_UP: str = "half_up"

ROUNDING_MODES = (ROUND_DOWN, ROUND_HALF_UP)

DEFAULT_ROUNDING: str = ROUND_DOWN


# ---------------------------------------------------------------------------
# Grammars
# ---------------------------------------------------------------------------

# User input after whitespace squish, '+' strip and trailing '.' completion.
NUMBER_PATTERN = re.compile(r"-?\d+(\.\d*)?", re.ASCII)

# Calculator operands: sign, integer digits, fractional digits.
OPERAND_PATTERN = re.compile(r"(-?)(\d+)(?:\.(\d*))?", re.ASCII)


# ---------------------------------------------------------------------------
# Environment configuration
# ---------------------------------------------------------------------------

ENV_PRECISION: str = "NUMBER_VALUE_PRECISION"
ENV_ROUNDING: str = "NUMBER_VALUE_ROUNDING"
ENV_DEBUG: str = "NUMBER_VALUE_DEBUG"


__all__ = [
    "DEFAULT_PRECISION",
    "ROUND_DOWN",
    "ROUND_HALF_UP",
    "ROUNDING_MODES",
    "DEFAULT_ROUNDING",
    "NUMBER_PATTERN",
    "OPERAND_PATTERN",
    "ENV_PRECISION",
    "ENV_ROUNDING",
    "ENV_DEBUG",
]
