"""
Unit tests for benchparse.core.compare.
"""
import itertools

import pytest

from benchparse.core.compare import Comparison, compare
from benchparse.core.errors import (
    ComparisonError,
    DifferentNamesError,
    InvalidOperationError,
    NonComparableError,
    OperationNotDefinedError,
)
from benchparse.core.models import NamedVariable
from benchparse.core.values import typed


def var(name, value):
    return NamedVariable(name=name, value=typed(value))


ALL_OPS = list(Comparison)


@pytest.mark.parametrize("op,a,b,expected", [
    (Comparison.EQ, 1, 1, True),
    (Comparison.EQ, 1, 2, False),
    (Comparison.NE, 1, 2, True),
    (Comparison.LT, 1, 2, True),
    (Comparison.LT, 2, 1, False),
    (Comparison.GT, 2, 1, True),
    (Comparison.GT, 1, 1, False),
    (Comparison.LE, 1, 1, True),
    (Comparison.LE, 2, 1, False),
    (Comparison.GE, 1, 1, True),
    (Comparison.GE, 0, 1, False),
    (Comparison.EQ, 1.5, 1.5, True),
    (Comparison.LT, 0.001, 0.01, True),
    (Comparison.GT, 1.0, 0.01, True),
])
def test_numeric_same_kind(op, a, b, expected):
    assert compare(op, var("x", a), var("x", b)) is expected


@pytest.mark.parametrize("op,a,b,expected", [
    (Comparison.EQ, 1, 1.0, True),
    (Comparison.NE, 1, 1.0, False),
    (Comparison.LT, 0.001, 1, True),
    (Comparison.LT, 1.0, 1, False),
    (Comparison.GT, 2, 1.5, True),
    (Comparison.LE, 1.0, 1, True),
    (Comparison.GE, 1, 1.5, False),
])
def test_numeric_mixed_kinds_widen_to_float(op, a, b, expected):
    assert compare(op, var("x", a), var("x", b)) is expected


@pytest.mark.parametrize("op,a,b,expected", [
    (Comparison.EQ, "sin(x)", "sin(x)", True),
    (Comparison.NE, "sin(x)", "2x+3", True),
    (Comparison.LT, "abc", "abd", True),
    (Comparison.GT, "b", "a", True),
    (Comparison.LE, "a", "a", True),
    (Comparison.GE, "a", "b", False),
])
def test_text(op, a, b, expected):
    assert compare(op, var("y", a), var("y", b)) is expected


def test_bool_equality():
    assert compare(Comparison.EQ, var("abs_val", True), var("abs_val", True)) is True
    assert compare(Comparison.NE, var("abs_val", True), var("abs_val", False)) is True


@pytest.mark.parametrize("op", [Comparison.LT, Comparison.GT, Comparison.LE, Comparison.GE])
def test_bool_ordering_not_defined(op):
    with pytest.raises(ComparisonError) as exc_info:
        compare(op, var("abs_val", True), var("abs_val", False))
    assert isinstance(exc_info.value.cause, OperationNotDefinedError)


@pytest.mark.parametrize("op", ALL_OPS)
@pytest.mark.parametrize("a,b", [("sin(x)", 2), (True, "true"), (1.5, False)])
def test_mixed_kinds_non_comparable(op, a, b):
    with pytest.raises(ComparisonError) as exc_info:
        compare(op, var("y", a), var("y", b))
    assert exc_info.value.is_a(NonComparableError)
    assert isinstance(exc_info.value.__cause__, NonComparableError)


@pytest.mark.parametrize("op", ALL_OPS)
def test_different_names(op):
    with pytest.raises(ComparisonError) as exc_info:
        compare(op, var("a", 1), var("b", 1))
    assert exc_info.value.is_a(DifferentNamesError)


def test_invalid_operation():
    with pytest.raises(ComparisonError) as exc_info:
        compare("=~", var("a", 1), var("a", 1))
    assert exc_info.value.is_a(InvalidOperationError)
    assert "=~" in str(exc_info.value)


def test_operator_symbol_accepted():
    assert compare("<=", var("a", 1), var("a", 2)) is True


def test_error_message_has_context():
    with pytest.raises(ComparisonError) as exc_info:
        compare(Comparison.EQ, var("y", "sin(x)"), var("y", 2))
    message = str(exc_info.value)
    assert message == "cannot evaluate (y=sin(x))==(y=2): values cannot be compared"
    assert exc_info.value.operator is Comparison.EQ


NUMBERS = [-2, 0, 1, 3, -1.5, 0.001, 1.0, 2.75]


@pytest.mark.parametrize("a,b", list(itertools.product(NUMBERS, repeat=2)))
def test_operator_dualities(a, b):
    x, y = var("n", a), var("n", b)
    assert compare(Comparison.LT, x, y) is (not compare(Comparison.GE, x, y))
    assert compare(Comparison.GT, x, y) is (not compare(Comparison.LE, x, y))
    assert compare(Comparison.EQ, x, y) is (not compare(Comparison.NE, x, y))


def test_description():
    assert Comparison.GE.description == "ge"
    assert str(Comparison.NE) == "!="


def test_derived_operators_inherit_ordering_errors_on_equal_bools():
    for op in (Comparison.LE, Comparison.GT):
        with pytest.raises(ComparisonError) as exc_info:
            compare(op, var("abs_val", True), var("abs_val", True))
        assert exc_info.value.is_a(OperationNotDefinedError)
