# Filter expressions of the form 'var_name<op>var_value'.
from __future__ import annotations
from typing import List
from pydantic import BaseModel

from .compare import Comparison
from .errors import MalformedFilterError
from .models import DEFAULT_FLOAT_FORMAT, NamedVariable, TypedValue
from .values import infer

# multi-character operators first, '<=' contains '<'
_OPERATOR_ORDER: List[Comparison] = [
    Comparison.EQ,
    Comparison.NE,
    Comparison.LE,
    Comparison.GE,
    Comparison.LT,
    Comparison.GT,
]


class FilterExpression(BaseModel):
    model_config = {"frozen": True}

    variable_name: str
    operator: Comparison
    value: TypedValue

    def as_variable(self) -> NamedVariable:
        return NamedVariable(name=self.variable_name, value=self.value)

    def render(self, float_format: str = DEFAULT_FLOAT_FORMAT) -> str:
        return f"{self.variable_name}{self.operator.value}{self.value.render(float_format)}"

    def __str__(self) -> str:
        return self.render()


def parse_filter(expr: str) -> FilterExpression:
    for op in _OPERATOR_ORDER:
        split = expr.split(op.value)
        if len(split) != 2:
            continue
        return FilterExpression(variable_name=split[0], operator=op, value=infer(split[1]))
    raise MalformedFilterError(expr)
