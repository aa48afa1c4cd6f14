"""
Default calculator registry.

A registry lazily builds one shared calculator on first use and is read-only
afterwards. Construction runs exactly once even under concurrent first use
(double-checked under a lock). The module-level registry backs every
NumberValue that was not given an explicit `calculator=`.

Configuration (read when the default is built, not at import):
  NUMBER_VALUE_PRECISION  fractional digits, default 14
  NUMBER_VALUE_ROUNDING   'down' (default) or 'half_up'
"""

from __future__ import annotations

import os
import threading
from typing import Callable, Mapping, Optional

from .calculator import Calculator, FixedPointCalculator, env_flag
from .constants import (
    DEFAULT_PRECISION,
    DEFAULT_ROUNDING,
    ENV_DEBUG,
    ENV_PRECISION,
    ENV_ROUNDING,
)
from .exc import RegistryFrozenError

# Debug printing control
DEBUG_REGISTRY = env_flag(ENV_DEBUG)

def _dbg(msg: str) -> None:
    if DEBUG_REGISTRY:
        print(msg)


def calculator_from_env(environ: Optional[Mapping[str, str]] = None) -> FixedPointCalculator:
    """Build the default FixedPointCalculator from environment variables."""
    env = os.environ if environ is None else environ
    raw_precision = env.get(ENV_PRECISION, "").strip()
    rounding = env.get(ENV_ROUNDING, "").strip() or DEFAULT_ROUNDING
    if raw_precision:
        try:
            precision = int(raw_precision)
        except ValueError:
            raise ValueError(f"{ENV_PRECISION} must be an integer, got {raw_precision!r}") from None
    else:
        precision = DEFAULT_PRECISION
    return FixedPointCalculator(digits=precision, rounding=rounding)


class CalculatorRegistry:
    """Holder of one lazily-constructed shared calculator."""

    def __init__(self, factory: Callable[[], Calculator] = calculator_from_env):
        self._factory = factory
        self._instance: Optional[Calculator] = None
        self._lock = threading.Lock()

    def is_initialised(self) -> bool:
        return self._instance is not None

    def install(self, calculator: Calculator) -> None:
        """Replace the factory with a fixed calculator. Only valid before first use."""
        if not isinstance(calculator, Calculator):
            raise TypeError(f"expected a Calculator, got {type(calculator).__name__}")
        with self._lock:
            if self._instance is not None:
                raise RegistryFrozenError(
                    "default calculator already in use; install alternates before first use"
                )
            self._factory = lambda: calculator
        _dbg(f"registry: installed {calculator!r}")

    def instance(self) -> Calculator:
        inst = self._instance
        if inst is not None:
            return inst
        with self._lock:
            if self._instance is None:
                self._instance = self._factory()
                _dbg(f"registry: built {self._instance!r}")
            return self._instance


_REGISTRY = CalculatorRegistry()


def default_calculator() -> Calculator:
    """Return the process-wide shared calculator, building it on first call."""
    return _REGISTRY.instance()


def install_default_calculator(calculator: Calculator) -> None:
    """Install an alternate process-wide calculator (before first use only)."""
    _REGISTRY.install(calculator)


__all__ = [
    "CalculatorRegistry",
    "calculator_from_env",
    "default_calculator",
    "install_default_calculator",
]
