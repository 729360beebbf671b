"""
Shared pytest configuration for unit tests.
Ensures project root is on sys.path and provides common fixtures.
"""
import io
import sys
from pathlib import Path
import pytest

# Add project root
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from benchparse.core.models import (
    BoolValue, CaseInputs, FloatValue, IntValue, Measured, MeasurementRecord,
    NamedVariable, PathSegment, ResultEntry, TextValue,
)
from benchparse.core.results import Case, ResultList
from benchparse.services.line_parser import set_line_parser


SAMPLE_OUTPUT = """\
goos: darwin
goarch: amd64
BenchmarkMath/areaUnder/y=sin(x)/delta=0.001000/start_x=-2/end_x=1/abs_val=true-4         \t   21801\t     55357 ns/op\t       0 B/op\t       0 allocs/op
BenchmarkMath/areaUnder/y=2x+3/delta=1.000000/start_x=-1/end_x=2/abs_val=false-4          \t88335925\t        13.3 ns/op\t       0 B/op\t       0 allocs/op
BenchmarkMath/max/y=2x+3/delta=0.001000/start_x=-2/end_x=1-4                              \t   56282\t     20361 ns/op\t       0 B/op\t       0 allocs/op
BenchmarkMath/max/y=sin(x)/delta=1.000000/start_x=-1/end_x=2-4                            \t16381138\t        62.7 ns/op\t       0 B/op\t       0 allocs/op
PASS
"""

_MEM = int(Measured.NS_PER_OP | Measured.ALLOCED_BYTES_PER_OP | Measured.ALLOCS_PER_OP)


def _result(sub, y, delta, start_x, end_x, abs_val, name, n, ns):
    variables = [
        NamedVariable(name="y", value=TextValue(value=y), position=2),
        NamedVariable(name="delta", value=FloatValue(value=delta), position=3),
        NamedVariable(name="start_x", value=IntValue(value=start_x), position=4),
        NamedVariable(name="end_x", value=IntValue(value=end_x), position=5),
    ]
    if abs_val is not None:
        variables.append(NamedVariable(name="abs_val", value=BoolValue(value=abs_val), position=6))
    return ResultEntry(
        inputs=CaseInputs(
            variables=variables,
            segments=[PathSegment(name=sub, position=1)],
            concurrency=4,
        ),
        outputs=MeasurementRecord(name=name, iterations=n, ns_per_op=ns, measured=_MEM),
    )


def build_sample_case() -> Case:
    return Case(name="BenchmarkMath", results=ResultList([
        _result("areaUnder", "sin(x)", 0.001, -2, 1, True,
                "BenchmarkMath/areaUnder/y=sin(x)/delta=0.001000/start_x=-2/end_x=1/abs_val=true-4", 21801, 55357),
        _result("areaUnder", "2x+3", 1.0, -1, 2, False,
                "BenchmarkMath/areaUnder/y=2x+3/delta=1.000000/start_x=-1/end_x=2/abs_val=false-4", 88335925, 13.3),
        _result("max", "2x+3", 0.001, -2, 1, None,
                "BenchmarkMath/max/y=2x+3/delta=0.001000/start_x=-2/end_x=1-4", 56282, 20361),
        _result("max", "sin(x)", 1.0, -1, 2, None,
                "BenchmarkMath/max/y=sin(x)/delta=1.000000/start_x=-1/end_x=2-4", 16381138, 62.7),
    ]))


@pytest.fixture()
def sample_case():
    return build_sample_case()


@pytest.fixture()
def sample_results(sample_case):
    return sample_case.results


@pytest.fixture()
def sample_output():
    return SAMPLE_OUTPUT


@pytest.fixture()
def sample_stream(sample_output):
    return io.StringIO(sample_output)


@pytest.fixture(autouse=True)
def reset_line_parser():
    yield
    set_line_parser(None)
