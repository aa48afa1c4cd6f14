#!/usr/bin/env python3
"""Command-line front end for NumberValue arithmetic.

Examples:
  run_number.py sum 1 2 3.5 15          -> 21.5
  run_number.py divide 1 3              -> 0.33333333333333
  run_number.py divide --precision 4 1 3 -> 0.3333
  run_number.py compare 0 0.0           -> 0
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from number_value import FixedPointCalculator, NumberValue, NumberValueError
from number_value.core import DEFAULT_PRECISION, ROUNDING_MODES, ROUND_DOWN


OPERATIONS = ("sum", "avg", "add", "subtract", "multiply", "divide", "compare")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fixed-precision decimal arithmetic.")
    parser.add_argument("operation", choices=OPERATIONS, help="Operation to apply")
    parser.add_argument("numbers", nargs="*", help="Operands; the first is the receiver for add/subtract/multiply/divide")
    parser.add_argument("--precision", type=int, default=DEFAULT_PRECISION, help="Fractional digits kept")
    parser.add_argument("--rounding", choices=ROUNDING_MODES, default=ROUND_DOWN, help="Rounding mode")
    return parser.parse_intermixed_args(argv)


def run(args: argparse.Namespace) -> str:
    calc = FixedPointCalculator(digits=args.precision, rounding=args.rounding)
    numbers = args.numbers
    if args.operation == "sum":
        return str(NumberValue.sum(*numbers, calculator=calc))
    if args.operation == "avg":
        return str(NumberValue.avg(*numbers, calculator=calc))
    if not numbers:
        raise ValueError(f"{args.operation} needs at least one number")
    receiver = NumberValue.of(numbers[0], calculator=calc)
    if args.operation == "compare":
        if len(numbers) != 2:
            raise ValueError("compare needs exactly two numbers")
        return str(calc.compare(receiver.to_string(), NumberValue.of(numbers[1]).to_string()))
    return str(getattr(receiver, args.operation)(*numbers[1:]))


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        print(run(args))
    except (NumberValueError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
