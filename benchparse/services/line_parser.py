"""
Benchmark line parsing service.

Turns a single testing.B output line such as

    BenchmarkFoo/n=10-4    21801    55357 ns/op    0 B/op    0 allocs/op

into a MeasurementRecord. Lines that are not benchmark results (headers,
PASS/FAIL banners, blank lines) raise LineNotRecognizedError.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Dict, Optional
import logging
import re

from benchparse.core.errors import LineNotRecognizedError
from benchparse.core.models import Measured, MeasurementRecord

logger = logging.getLogger("benchparse.line_parser")

_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_UINT_RE = re.compile(r"^[0-9]+$")
_FLOAT_RE = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")

_FLOAT_UNITS: Dict[str, tuple] = {
    "ns/op": ("ns_per_op", Measured.NS_PER_OP),
    "MB/s": ("mb_per_s", Measured.MB_PER_S),
}
_UINT_UNITS: Dict[str, tuple] = {
    "B/op": ("alloced_bytes_per_op", Measured.ALLOCED_BYTES_PER_OP),
    "allocs/op": ("allocs_per_op", Measured.ALLOCS_PER_OP),
}


class BaseLineParser(ABC):
    @abstractmethod
    def parse_line(self, line: str) -> MeasurementRecord:
        """
        Parse one output line.

        Raises:
            LineNotRecognizedError: the line is not a benchmark result
        """


class GoBenchLineParser(BaseLineParser):
    """Parser for the `go test -bench` line format."""

    def __init__(self, prefix: str = "Benchmark"):
        self.prefix = prefix

    def parse_line(self, line: str) -> MeasurementRecord:
        fields = line.split()
        # name and iteration count are required and positional
        if len(fields) < 2:
            raise LineNotRecognizedError(f"two fields required, have {len(fields)}")
        if not fields[0].startswith(self.prefix):
            raise LineNotRecognizedError(f"first field does not begin with '{self.prefix}'")
        if not _INT_RE.match(fields[1]):
            raise LineNotRecognizedError(f"invalid iteration count '{fields[1]}'")

        values: Dict[str, object] = {"name": fields[0], "iterations": int(fields[1])}
        measured = Measured(0)
        for i in range(1, len(fields) // 2):
            quant, unit = fields[i * 2], fields[i * 2 + 1]
            if unit in _FLOAT_UNITS and _FLOAT_RE.match(quant):
                attr, flag = _FLOAT_UNITS[unit]
                values[attr] = float(quant)
                measured |= flag
            elif unit in _UINT_UNITS and _UINT_RE.match(quant):
                attr, flag = _UINT_UNITS[unit]
                values[attr] = int(quant)
                measured |= flag
        return MeasurementRecord(measured=int(measured), **values)


_line_parser_instance: Optional[BaseLineParser] = None


def get_line_parser() -> BaseLineParser:
    global _line_parser_instance
    if _line_parser_instance is None:
        _line_parser_instance = GoBenchLineParser()
    return _line_parser_instance


def set_line_parser(parser: Optional[BaseLineParser]):
    global _line_parser_instance
    _line_parser_instance = parser
