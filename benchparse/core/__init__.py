"""Core subpackage: models, values, comparison, names, filters, results, engine."""

from .errors import *  # re-export error types
from .models import *  # re-export result models
from .values import infer, typed
from .compare import Comparison, compare
from .names import decompose
from .filters import FilterExpression, parse_filter
from .results import Case, ResultList
from .config import BenchParseConfig
from .validate import EventValidator, validate_event, ValidationResult
from .engine import BenchParseEngine, parse_benchmarks, parse_benchmarks_from_json

__all__ = [
    "infer",
    "typed",
    "Comparison",
    "compare",
    "decompose",
    "FilterExpression",
    "parse_filter",
    "Case",
    "ResultList",
    "BenchParseConfig",
    "EventValidator",
    "validate_event",
    "ValidationResult",
    "BenchParseEngine",
    "parse_benchmarks",
    "parse_benchmarks_from_json",
]
