"""
Exception types raised by benchparse.

Comparison failures are reported as a ComparisonError carrying the two
operands and the operator; the specific reason is available as ``cause``
(also chained as ``__cause__``).
"""
from __future__ import annotations
from typing import Any, Optional, Type


class BenchParseError(Exception):
    """Base class for all benchparse errors."""


class DifferentNamesError(BenchParseError):
    def __init__(self, message: str = "variables have different names"):
        super().__init__(message)


class NonComparableError(BenchParseError):
    def __init__(self, message: str = "values cannot be compared"):
        super().__init__(message)


class OperationNotDefinedError(BenchParseError):
    def __init__(self, message: str = "operation not defined for values"):
        super().__init__(message)


class InvalidOperationError(BenchParseError):
    def __init__(self, message: str = "invalid comparison operation"):
        super().__init__(message)


class ComparisonError(BenchParseError):
    """Comparison of two named variables failed."""

    def __init__(self, left: Any, right: Any, operator: Any, cause: BenchParseError):
        self.left = left
        self.right = right
        self.operator = operator
        self.cause = cause
        op = getattr(operator, "value", operator)
        super().__init__(f"cannot evaluate ({left}){op}({right}): {cause}")

    def is_a(self, kind: Type[BaseException]) -> bool:
        return isinstance(self.cause, kind)


class MalformedFilterError(BenchParseError):
    def __init__(self, expression: str):
        self.expression = expression
        super().__init__(f"filter expression '{expression}' not of form 'var_name==var_value'")


class MalformedNameError(BenchParseError):
    def __init__(self, name: str, reason: Optional[str] = None):
        self.name = name
        message = f"benchmark name '{name}' is malformed"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MeasurementNotPresentError(BenchParseError):
    def __init__(self, measurement: str):
        self.measurement = measurement
        super().__init__(f"{measurement} not measured")


class EventDecodeError(BenchParseError):
    def __init__(self, line_number: int, reason: str):
        self.line_number = line_number
        super().__init__(f"unmarshal event (line {line_number}): {reason}")


class LineNotRecognizedError(BenchParseError):
    """Raised by line parsers for lines that are not benchmark results."""
