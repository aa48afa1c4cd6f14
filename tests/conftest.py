from __future__ import annotations

from typing import List, Tuple

import pytest

# Import project primitives
from number_value import FixedPointCalculator


# -----------------------------
# Test helpers (pure functions)
# -----------------------------


class RecordingCalculator:
    """Calculator stub that records every call and delegates to a FixedPointCalculator.

    - calls: list of (operation, a, b) tuples in call order.
    """

    def __init__(self, digits: int = 14) -> None:
        self.inner = FixedPointCalculator(digits=digits)
        self.calls: List[Tuple[str, str, str]] = []

    def precision(self) -> int:
        return self.inner.precision()

    def _record(self, op: str, a: str, b: str):
        self.calls.append((op, a, b))
        return getattr(self.inner, op)(a, b)

    def add(self, a, b):
        return self._record("add", a, b)

    def subtract(self, a, b):
        return self._record("subtract", a, b)

    def multiply(self, a, b):
        return self._record("multiply", a, b)

    def divide(self, a, b):
        return self._record("divide", a, b)

    def compare(self, a, b):
        return self._record("compare", a, b)


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def calc() -> FixedPointCalculator:
    return FixedPointCalculator()


@pytest.fixture()
def calc_half_up() -> FixedPointCalculator:
    return FixedPointCalculator(digits=2, rounding="half_up")


@pytest.fixture()
def recorder() -> RecordingCalculator:
    return RecordingCalculator()
