"""
Calculator backends: fixed-precision arithmetic over decimal strings.

- Operands and results are canonical decimal strings ("-12.5", "0", "-0").
- All arithmetic is integer-domain: each operand becomes (sign, magnitude, scale)
  meaning magnitude * 10^-scale; results are exact before being reduced to
  `precision()` fractional digits. No binary floats, no Decimal round-trips.
- Reduction is sign-symmetric: ROUND_DOWN truncates toward zero,
  ROUND_HALF_UP rounds half away from zero.

Signed zero:
- A result whose magnitude reduces to zero keeps the sign of the exact result.
- An exact zero from multiply/divide carries the xor of the operand signs
  (0 * -1 -> "-0"); from add/subtract it is negative only for -0 + -0.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Protocol, Tuple, runtime_checkable

from .constants import (
    DEFAULT_PRECISION,
    DEFAULT_ROUNDING,
    ENV_DEBUG,
    OPERAND_PATTERN,
    ROUND_HALF_UP,
    ROUNDING_MODES,
)
from .exc import DivisionByZeroError, ParseError

# Debug printing control
def env_flag(name: str, environ: Optional[Mapping[str, str]] = None) -> bool:
    """True when the variable is set to 1/true/yes/on (any case); unset or anything else is False."""
    env = os.environ if environ is None else environ
    return env.get(name, "").strip().lower() in ("1", "true", "yes", "on")


DEBUG_CALC = env_flag(ENV_DEBUG)


def _dbg(msg: str) -> None:
    if DEBUG_CALC:
        print(msg)


# ----------------------------
# Backend contract
# ----------------------------

@runtime_checkable
class Calculator(Protocol):
    """Arithmetic backend used by NumberValue.

    Every method takes canonical decimal strings. `compare` returns 0 if the
    operands are equal at `precision()` digits, 1 if `a` is larger, -1 otherwise.
    """

    def precision(self) -> int: ...

    def add(self, a: str, b: str) -> str: ...

    def subtract(self, a: str, b: str) -> str: ...

    def multiply(self, a: str, b: str) -> str: ...

    def divide(self, a: str, b: str) -> str: ...

    def compare(self, a: str, b: str) -> int: ...


# ----------------------------
# Integer-domain helpers
# ----------------------------

# (negative, magnitude, scale)
Operand = Tuple[bool, int, int]


def _ten_pow(n: int) -> int:
    """Return 10**n for n >= 0 (internal helper)."""
    if n < 0:
        raise ValueError("_ten_pow expects non-negative exponent")
    return 10 ** n


def parse_operand(text: str) -> Operand:
    """Split a decimal string into (negative, magnitude, scale).

      '-12.50' -> (True, 1250, 2)
      '-0'     -> (True, 0, 0)
      '7.'     -> (False, 7, 0)
    """
    if not isinstance(text, str):
        raise ParseError(text, "calculator operands must be strings")
    match = OPERAND_PATTERN.fullmatch(text)
    if match is None:
        raise ParseError(text)
    sign, integer, fractional = match.groups()
    fractional = fractional or ""
    return sign == "-", int(integer + fractional), len(fractional)


def _div_round(num: int, den: int, rounding: str) -> int:
    """Divide non-negative `num` by positive `den` with the given rounding."""
    q, r = divmod(num, den)
    if rounding == ROUND_HALF_UP and r != 0 and 2 * r >= den:
        q += 1
    return q


def _rescale(magnitude: int, scale: int, target: int, rounding: str) -> int:
    """Express magnitude * 10^-scale as an integer count of 10^-target units."""
    if scale <= target:
        return magnitude * _ten_pow(target - scale)
    return _div_round(magnitude, _ten_pow(scale - target), rounding)


def format_fixed(negative: bool, magnitude: int, scale: int) -> str:
    """Render magnitude * 10^-scale canonically (no trailing fractional zeros).

      (False, 150, 2) -> '1.5'
      (True, 0, 14)   -> '-0'
    """
    digits = str(magnitude)
    if scale > 0:
        digits = digits.rjust(scale + 1, "0")
        integer, fractional = digits[:-scale], digits[-scale:].rstrip("0")
    else:
        integer, fractional = digits, ""
    text = f"{integer}.{fractional}" if fractional else integer
    return f"-{text}" if negative else text


# ----------------------------
# Fixed-point calculator
# ----------------------------

@dataclass(frozen=True)
class FixedPointCalculator:
    """Default calculator: exact integer arithmetic reduced to `digits` fractional digits."""

    digits: int = DEFAULT_PRECISION
    rounding: str = DEFAULT_ROUNDING

    def __post_init__(self):
        if isinstance(self.digits, bool) or not isinstance(self.digits, int) or self.digits < 0:
            raise ValueError(f"precision must be a non-negative int, got {self.digits!r}")
        if self.rounding not in ROUNDING_MODES:
            raise ValueError(f"unknown rounding mode {self.rounding!r}; expected one of {ROUNDING_MODES}")

    def precision(self) -> int:
        return self.digits

    # ------------- arithmetic -------------

    def _finish(self, negative: bool, magnitude: int, scale: int) -> str:
        reduced = _rescale(magnitude, scale, self.digits, self.rounding)
        return format_fixed(negative, reduced, self.digits)

    def _add_signed(self, a: Operand, b: Operand) -> str:
        na, ma, sa = a
        nb, mb, sb = b
        # Align to the larger scale to avoid fractions.
        scale = max(sa, sb)
        va = ma * _ten_pow(scale - sa)
        vb = mb * _ten_pow(scale - sb)
        total = (-va if na else va) + (-vb if nb else vb)
        if total == 0:
            negative = na and nb
        else:
            negative = total < 0
        return self._finish(negative, abs(total), scale)

    def add(self, a: str, b: str) -> str:
        result = self._add_signed(parse_operand(a), parse_operand(b))
        _dbg(f"calc.add: {a} + {b} -> {result}")
        return result

    def subtract(self, a: str, b: str) -> str:
        nb, mb, sb = parse_operand(b)
        result = self._add_signed(parse_operand(a), (not nb, mb, sb))
        _dbg(f"calc.subtract: {a} - {b} -> {result}")
        return result

    def multiply(self, a: str, b: str) -> str:
        na, ma, sa = parse_operand(a)
        nb, mb, sb = parse_operand(b)
        result = self._finish(na != nb, ma * mb, sa + sb)
        _dbg(f"calc.multiply: {a} * {b} -> {result}")
        return result

    def divide(self, a: str, b: str) -> str:
        na, ma, sa = parse_operand(a)
        nb, mb, sb = parse_operand(b)
        if mb == 0:
            raise DivisionByZeroError(a, b)
        # (ma / 10^sa) / (mb / 10^sb) expressed in units of 10^-digits
        num = ma * _ten_pow(sb + self.digits)
        den = mb * _ten_pow(sa)
        q = _div_round(num, den, self.rounding)
        result = format_fixed(na != nb, q, self.digits)
        _dbg(f"calc.divide: {a} / {b} -> {result}")
        return result

    # ------------- comparison -------------

    def _reduced(self, text: str) -> int:
        negative, magnitude, scale = parse_operand(text)
        reduced = _rescale(magnitude, scale, self.digits, self.rounding)
        return -reduced if negative else reduced

    def compare(self, a: str, b: str) -> int:
        va, vb = self._reduced(a), self._reduced(b)
        return (va > vb) - (va < vb)


__all__ = [
    "Calculator",
    "FixedPointCalculator",
    "parse_operand",
    "format_fixed",
    "env_flag",
]
