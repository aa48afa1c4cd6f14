import pytest

from number_value import FixedPointCalculator, NumberValue
from number_value.core.exc import (
    DivisionByZeroError,
    NonIterableArgumentError,
    ParseError,
    UnsupportedTypeError,
)


def _num(x) -> NumberValue:
    """Helper: NumberValue on the default calculator."""
    return NumberValue.of(x)


# -----------------------------
# sum / avg
# -----------------------------

@pytest.mark.parametrize(
    "numbers,expected",
    [
        ([], "0"),
        ([1, 2, 3.5, "15"], "21.5"),
        ([_num("-2.5")], "-2.5"),
    ],
)
def test_sum(numbers, expected):
    actual = NumberValue.sum(*numbers)
    print(f"[sum] {numbers} -> {actual} (expected {expected})")
    assert str(actual) == expected


@pytest.mark.parametrize(
    "numbers,expected",
    [
        ([], "0"),
        ([1, 2, 3, 4, 5], "3"),
        ([1, 2], "1.5"),
        ([7], "7"),
    ],
)
def test_avg(numbers, expected):
    actual = NumberValue.avg(*numbers)
    print(f"[avg] {numbers} -> {actual} (expected {expected}; avg() is 0, not a division fault)")
    assert str(actual) == expected


def test_sum_and_avg_accept_calculator():
    print("[sum/avg-calculator] precision 2 half_up: avg(1, 2, 2) = 5/3 -> 1.67")
    calc = FixedPointCalculator(digits=2, rounding="half_up")
    assert str(NumberValue.avg(1, 2, 2, calculator=calc)) == "1.67"
    assert NumberValue.sum(1, 2, calculator=calc).calculator is calc


# -----------------------------
# Zero / one / many operands
# -----------------------------

@pytest.mark.parametrize(
    "number,addends,expected",
    [
        (0, [], "0"),
        (0, [1, 2, 3, 4, 5], "15"),
        (0, [1, 2.5, 3.5], "7"),
        (0, [1, 2.5], "3.5"),
    ],
)
def test_add(number, addends, expected):
    actual = _num(number).add(*addends)
    print(f"[add] {number} + {addends} -> {actual}")
    assert str(actual) == expected


@pytest.mark.parametrize(
    "number,subtrahends,expected",
    [
        (0, [], "0"),
        (0, [1, 2, 3, 4, 5], "-15"),
        (0, [1, 2.5, 3.5], "-7"),
        (0, [1, 2.5], "-3.5"),
    ],
)
def test_subtract(number, subtrahends, expected):
    actual = _num(number).subtract(*subtrahends)
    print(f"[subtract] {number} - {subtrahends} -> {actual}")
    assert str(actual) == expected


@pytest.mark.parametrize(
    "number,multipliers,expected",
    [
        (0, [], "0"),
        (0, [1, 2, 3, 4, 5], "0"),
        (1, [1, 2, 3, 4, 5], "120"),
        (1, [1, 2.5, 3.5], "8.75"),
        (1, [1, 2.5], "2.5"),
    ],
)
def test_multiply(number, multipliers, expected):
    actual = _num(number).multiply(*multipliers)
    print(f"[multiply] {number} * {multipliers} -> {actual}")
    assert str(actual) == expected


@pytest.mark.parametrize(
    "number,divisors,expected",
    [
        (0, [], "0"),
        (0, [1, 2, 3, 4, 5], "0"),
        (1, [1, 2, 3, 4, 5], "0.00833333333333"),
        (1, [1, 2.5, 3.5], "0.11428571428571"),
        (1, [1, 2.5], "0.4"),
    ],
)
def test_divide(number, divisors, expected):
    actual = _num(number).divide(*divisors)
    print(f"[divide] {number} / {divisors} -> {actual}")
    assert str(actual) == expected


@pytest.mark.parametrize("op", ["add", "subtract", "multiply", "divide"])
def test_zero_operands_is_identity_copy(op):
    print(f"[identity] x.{op}() returns an equal copy keeping the stored text")
    x = _num("1.50")
    y = getattr(x, op)()
    assert y is not x
    assert y.number == "1.50"
    assert y.equals(x)


def test_receiver_is_never_modified():
    print("[immutability] x = 2; x.add(3), x.divide(7) leave x == '2'")
    x = _num("2")
    x.add(3)
    x.divide(7)
    assert x.number == "2"


def test_divide_precision_boundary():
    print("[divide-precision] 1/3 -> exactly 14 fractional digits")
    result = _num(1).divide(3)
    integer, fractional = result.split()
    assert str(result) == "0.33333333333333"
    assert integer == "0"
    assert len(fractional) == 14


def test_divide_is_left_fold_not_division_by_product():
    print("[divide-fold] (1 / 3) / 0.0001 keeps the truncated 1/3, unlike 1 / 0.0003")
    folded = _num(1).divide(3, "0.0001")
    direct = _num(1).divide("0.0003")
    print("folded ->", folded, "; direct ->", direct)
    assert str(folded) == "3333.3333333333"
    assert str(direct) == "3333.33333333333333"
    assert folded.not_equals(direct)


@pytest.mark.parametrize(
    "x,y",
    [
        ("1.5", "2.25"),
        ("-7", "0.00000000000001"),
        ("123456789012345678901234567890.5", "-0.5"),
        ("0", "-0"),
        ("-0.222561", "1000000"),
    ],
)
def test_additive_inverse(x, y):
    back = _num(x).add(y).subtract(y)
    print(f"[additive-inverse] ({x} + {y}) - {y} -> {back}")
    assert back.equals(x)


def test_calls_reach_calculator_in_order(recorder):
    print("[dispatch-order] 1.50 + 2 + '3' -> add('1.5','2'), add('3.5','3')")
    result = NumberValue.of("1.50", calculator=recorder).add(2, "3")
    print("calls ->", recorder.calls)
    assert recorder.calls == [("add", "1.5", "2"), ("add", "3.5", "3")]
    assert str(result) == "6.5"
    assert result.calculator is recorder


def test_injected_calculator_is_inherited():
    print("[injection] precision-4 calculator flows through derived values")
    calc = FixedPointCalculator(digits=4)
    third = NumberValue.of(1, calculator=calc).divide(3)
    assert str(third) == "0.3333"
    assert third.calculator is calc
    assert str(third.multiply(3)) == "0.9999"
    assert NumberValue.of(third).calculator is calc


# -----------------------------
# fold()
# -----------------------------

def test_fold_over_collections():
    print("[fold] list and generator operands; empty collection is identity")
    assert str(_num(0).fold("add", [1, 2, 3])) == "6"
    assert str(_num(100).fold("subtract", (x for x in [1, 2]))) == "97"
    assert str(_num("4.5").fold("multiply", [])) == "4.5"


@pytest.mark.parametrize("operands", [5, "123", _num(1), None])
def test_fold_rejects_scalars(operands):
    print(f"[fold-scalar] {operands!r} -> expect NonIterableArgumentError")
    with pytest.raises(NonIterableArgumentError) as info:
        _num(0).fold("add", operands)
    assert info.value.method == "add"
    assert info.value.cls == "NumberValue"


def test_fold_rejects_unknown_operation():
    print("[fold-unknown] 'power' -> expect ValueError")
    with pytest.raises(ValueError):
        _num(2).fold("power", [2])


def test_collection_as_single_operand_is_unsupported():
    print("[dispatch] add([1, 2]) -> lists are not numbers, expect UnsupportedTypeError")
    with pytest.raises(UnsupportedTypeError):
        _num(0).add([1, 2])


# -----------------------------
# Error propagation
# -----------------------------

def test_divide_by_zero_propagates():
    print("[divide-zero] 1 / 0 and 1 / 2 / 0 -> expect DivisionByZeroError")
    with pytest.raises(DivisionByZeroError):
        _num(1).divide(0)
    with pytest.raises(ZeroDivisionError):
        _num(1).divide(2, "0.0")


def test_parse_error_propagates_from_operands():
    print("[parse-error] 1 + 'abc' -> expect ParseError, never silently 1")
    with pytest.raises(ParseError):
        _num(1).add("abc")
    with pytest.raises(ParseError):
        NumberValue.sum(1, "1,5")
