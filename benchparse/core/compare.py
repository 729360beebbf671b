"""
Comparison of named benchmark variables.

Numeric values (int or float, in any mix) compare by value after widening
to float. Text compares lexicographically. Booleans support equality only.
Values of any other pair of kinds cannot be compared.
"""
from __future__ import annotations
from enum import Enum
from typing import Any

from .errors import (
    BenchParseError,
    ComparisonError,
    DifferentNamesError,
    InvalidOperationError,
    NonComparableError,
    OperationNotDefinedError,
)
from .models import NamedVariable


class Comparison(str, Enum):
    EQ = "=="
    NE = "!="
    LT = "<"
    GT = ">"
    LE = "<="
    GE = ">="

    @property
    def description(self) -> str:
        return self.name.lower()

    def __str__(self) -> str:
        return self.value


def _equal(a: NamedVariable, b: NamedVariable) -> bool:
    if a.name != b.name:
        raise DifferentNamesError()
    v1, v2 = a.value, b.value
    if v1.is_numeric and v2.is_numeric:
        return float(v1.value) == float(v2.value)
    if v1.kind != v2.kind:
        raise NonComparableError()
    # text/text or bool/bool
    return v1.value == v2.value


def _less(a: NamedVariable, b: NamedVariable) -> bool:
    if a.name != b.name:
        raise DifferentNamesError()
    v1, v2 = a.value, b.value
    if v1.is_numeric and v2.is_numeric:
        return float(v1.value) < float(v2.value)
    if v1.kind != v2.kind:
        raise NonComparableError()
    if v1.kind == "text":
        return v1.value < v2.value
    raise OperationNotDefinedError()


def _evaluate(op: Comparison, a: NamedVariable, b: NamedVariable) -> bool:
    if op is Comparison.EQ:
        return _equal(a, b)
    if op is Comparison.NE:
        return not _equal(a, b)
    if op is Comparison.LT:
        return _less(a, b)
    if op in (Comparison.GT, Comparison.LE):
        # both checks run so errors from either surface
        eq, less = _equal(a, b), _less(a, b)
        return (eq or less) if op is Comparison.LE else not (eq or less)
    if op is Comparison.GE:
        return not _less(a, b)
    raise InvalidOperationError()


def _as_comparison(op: Any) -> Any:
    if isinstance(op, Comparison):
        return op
    try:
        return Comparison(op)
    except ValueError:
        return op


def compare(op: Any, a: NamedVariable, b: NamedVariable) -> bool:
    """
    Evaluate ``a <op> b``.

    Raises:
        ComparisonError: the values cannot be compared with ``op``; the
            reason (DifferentNamesError, NonComparableError,
            OperationNotDefinedError or InvalidOperationError) is ``cause``.
    """
    op = _as_comparison(op)
    if not isinstance(op, Comparison):
        cause = InvalidOperationError()
        raise ComparisonError(a, b, op, cause) from cause
    try:
        return _evaluate(op, a, b)
    except BenchParseError as e:
        raise ComparisonError(a, b, op, e) from e
