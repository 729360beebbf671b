"""
benchparse: typed parsing of Go benchmark output

Splits sub-benchmark names into typed 'name=value' inputs and supports
filtering and grouping of the parsed results.
"""

__version__ = "0.1.0"

# Public API re-exports from subpackages
from .core.errors import (
    BenchParseError,
    ComparisonError,
    DifferentNamesError,
    NonComparableError,
    OperationNotDefinedError,
    InvalidOperationError,
    MalformedFilterError,
    MalformedNameError,
    MeasurementNotPresentError,
    EventDecodeError,
)
from .core.models import (
    IntValue,
    FloatValue,
    BoolValue,
    TextValue,
    NamedVariable,
    PathSegment,
    CaseInputs,
    Measured,
    MeasurementRecord,
    ResultEntry,
)
from .core.values import infer, typed
from .core.compare import Comparison, compare
from .core.names import decompose
from .core.filters import FilterExpression, parse_filter
from .core.results import Case, ResultList
from .core.config import BenchParseConfig
from .core.engine import BenchParseEngine, parse_benchmarks, parse_benchmarks_from_json
from .services.line_parser import GoBenchLineParser, get_line_parser, set_line_parser
from .adapters import TextLineAdapter, JSONEventAdapter, create_adapter
