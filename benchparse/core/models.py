# Typed model of a decomposed benchmark result line.
from __future__ import annotations
from enum import IntFlag
import math
from typing import Annotated, List, Literal, Union
from pydantic import BaseModel, Field, model_validator

from .errors import MeasurementNotPresentError

DEFAULT_FLOAT_FORMAT = "%f"

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class IntValue(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["int"] = "int"
    value: int = Field(ge=INT64_MIN, le=INT64_MAX)

    @property
    def is_numeric(self) -> bool:
        return True

    def render(self, float_format: str = DEFAULT_FLOAT_FORMAT) -> str:
        return str(int(self.value))


class FloatValue(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["float"] = "float"
    value: float

    @property
    def is_numeric(self) -> bool:
        return True

    def render(self, float_format: str = DEFAULT_FLOAT_FORMAT) -> str:
        """Format with ``float_format``, or repr() when that would not parse back to the same value."""
        value = float(self.value)
        text = float_format % value
        try:
            parsed = float(text)
        except ValueError:
            return repr(value)
        if math.isnan(value) or parsed == value:
            return text
        return repr(value)


class BoolValue(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["bool"] = "bool"
    value: bool

    @property
    def is_numeric(self) -> bool:
        return False

    def render(self, float_format: str = DEFAULT_FLOAT_FORMAT) -> str:
        return "true" if self.value else "false"


class TextValue(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["text"] = "text"
    value: str

    @property
    def is_numeric(self) -> bool:
        return False

    def render(self, float_format: str = DEFAULT_FLOAT_FORMAT) -> str:
        return self.value


TypedValue = Annotated[
    Union[IntValue, FloatValue, BoolValue, TextValue],
    Field(discriminator="kind"),
]


class NamedVariable(BaseModel):
    """A ``name=value`` component of a sub-benchmark name."""
    model_config = {"frozen": True}

    name: str
    value: TypedValue
    position: int = 0

    def render(self, float_format: str = DEFAULT_FLOAT_FORMAT) -> str:
        return f"{self.name}={self.value.render(float_format)}"

    def __str__(self) -> str:
        return self.render()


class PathSegment(BaseModel):
    """A sub-benchmark name component that is not of the form ``name=value``."""
    model_config = {"frozen": True}

    name: str
    position: int = 0

    def render(self, float_format: str = DEFAULT_FLOAT_FORMAT) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


class CaseInputs(BaseModel):
    """
    Inputs of one sub-benchmark.

    For 'BenchmarkMyType/some_method/foo=2/bar=baz-4' the segments are
    [some_method], the variables [foo=2, bar=baz] and the concurrency 4.
    """
    model_config = {"frozen": True}

    variables: List[NamedVariable] = Field(default_factory=list)
    segments: List[PathSegment] = Field(default_factory=list)
    concurrency: int = 1

    @model_validator(mode="after")
    def _unique_positions(self):
        positions = [v.position for v in self.variables] + [s.position for s in self.segments]
        if len(positions) != len(set(positions)):
            raise ValueError(f"Duplicate input positions: {sorted(positions)}")
        return self

    def ordered(self) -> List[Union[NamedVariable, PathSegment]]:
        """Variables and segments interleaved in their original order."""
        return sorted([*self.variables, *self.segments], key=lambda item: item.position)

    def render(self, float_format: str = DEFAULT_FLOAT_FORMAT) -> str:
        rendered = "".join(f"/{item.render(float_format)}" for item in self.ordered())
        if self.concurrency > 1:
            rendered += f"-{self.concurrency}"
        return rendered

    def __str__(self) -> str:
        return self.render()


class Measured(IntFlag):
    NS_PER_OP = 1
    MB_PER_S = 2
    ALLOCED_BYTES_PER_OP = 4
    ALLOCS_PER_OP = 8


class MeasurementRecord(BaseModel):
    """
    Outputs of a single benchmark run.

    Not every output is measured on each run; the getters raise
    MeasurementNotPresentError for outputs whose bit is not set in
    ``measured``.
    """
    model_config = {"frozen": True}

    name: str = ""
    iterations: int = 0
    ns_per_op: float = 0.0
    mb_per_s: float = 0.0
    alloced_bytes_per_op: int = Field(default=0, ge=0)
    allocs_per_op: int = Field(default=0, ge=0)
    measured: int = 0

    def has(self, flag: Measured) -> bool:
        return bool(self.measured & flag)

    def get_iterations(self) -> int:
        return self.iterations

    def get_ns_per_op(self) -> float:
        if self.has(Measured.NS_PER_OP):
            return self.ns_per_op
        raise MeasurementNotPresentError("ns/op")

    def get_mb_per_s(self) -> float:
        # measured when testing.B.SetBytes() is called
        if self.has(Measured.MB_PER_S):
            return self.mb_per_s
        raise MeasurementNotPresentError("MB/s")

    def get_alloced_bytes_per_op(self) -> int:
        # measured with -test.benchmem or testing.B.ReportAllocs()
        if self.has(Measured.ALLOCED_BYTES_PER_OP):
            return self.alloced_bytes_per_op
        raise MeasurementNotPresentError("B/op")

    def get_allocs_per_op(self) -> int:
        if self.has(Measured.ALLOCS_PER_OP):
            return self.allocs_per_op
        raise MeasurementNotPresentError("allocs/op")

    def render(self) -> str:
        parts = [str(self.iterations)]
        if self.has(Measured.NS_PER_OP):
            parts.append("%.2f ns/op" % self.ns_per_op)
        if self.has(Measured.MB_PER_S):
            parts.append("%.2f MB/s" % self.mb_per_s)
        if self.has(Measured.ALLOCED_BYTES_PER_OP):
            parts.append("%d B/op" % self.alloced_bytes_per_op)
        if self.has(Measured.ALLOCS_PER_OP):
            parts.append("%d allocs/op" % self.allocs_per_op)
        return " ".join(parts)

    def __str__(self) -> str:
        return self.render()


class ResultEntry(BaseModel):
    """One line of benchmark output: its inputs and measured outputs."""
    model_config = {"frozen": True}

    inputs: CaseInputs
    outputs: MeasurementRecord
