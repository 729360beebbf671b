"""
benchparse Core Engine (core/engine.py)

Reads benchmark output through an input adapter, parses each line with the
line parser service and collects the results per top-level benchmark.
"""
from dataclasses import replace
from typing import Dict, Iterable, List, Optional
import logging

from .config import BenchParseConfig
from .errors import LineNotRecognizedError
from .models import ResultEntry
from .names import DEFAULT_CASE_PREFIX, decompose
from .results import Case, ResultList
from benchparse.adapters import BaseLineAdapter, create_adapter
from benchparse.services.line_parser import BaseLineParser, GoBenchLineParser, get_line_parser

logger = logging.getLogger("benchparse.engine")


class BenchParseEngine:
    """benchparse Core Engine"""

    def __init__(
        self,
        config: Optional[BenchParseConfig] = None,
        adapter: Optional[BaseLineAdapter] = None,
        line_parser: Optional[BaseLineParser] = None,
    ):
        self.config = config or BenchParseConfig.default()
        self.adapter = adapter or create_adapter(self.config.input_format, self.config.validate_events)
        if line_parser is not None:
            self.line_parser = line_parser
        elif self.config.case_prefix != DEFAULT_CASE_PREFIX:
            self.line_parser = GoBenchLineParser(prefix=self.config.case_prefix)
        else:
            self.line_parser = get_line_parser()

        logger.debug(
            f"Engine initialized - Adapter: {self.adapter.__class__.__name__}, "
            f"Line parser: {self.line_parser.__class__.__name__}"
        )

    def parse(self, stream: Iterable[str]) -> List[Case]:
        """
        Parse benchmark output into cases, in the order each top-level
        benchmark first appears.

        Raises:
            MalformedNameError: a benchmark line has a name that cannot be decomposed
            EventDecodeError: JSON input contains a line that is not a test event
            OSError: reading ``stream`` failed
        """
        cases: Dict[str, Case] = {}
        skipped = 0
        for line in self.adapter.iter_lines(stream):
            try:
                record = self.line_parser.parse_line(line)
            except LineNotRecognizedError as e:
                skipped += 1
                logger.debug(f"Skipping line {line!r}: {e}")
                continue

            name, inputs = decompose(record.name, self.config.case_prefix)
            case = cases.get(name)
            if case is None:
                case = Case(name=name, results=ResultList())
                cases[name] = case
            case.results.append(ResultEntry(inputs=inputs, outputs=record))

        parsed = list(cases.values())
        logger.info(
            f"Parsed {sum(len(c.results) for c in parsed)} results in {len(parsed)} benchmarks "
            f"({skipped} lines skipped)"
        )
        return parsed


def parse_benchmarks(stream: Iterable[str], config: Optional[BenchParseConfig] = None) -> List[Case]:
    """Parse plain testing.B output."""
    config = config or BenchParseConfig.default()
    if config.input_format != "text":
        config = replace(config, input_format="text")
    return BenchParseEngine(config).parse(stream)


def parse_benchmarks_from_json(stream: Iterable[str], config: Optional[BenchParseConfig] = None) -> List[Case]:
    """Parse `go test -json` output."""
    config = config or BenchParseConfig.for_json()
    if config.input_format != "json":
        config = replace(config, input_format="json")
    return BenchParseEngine(config).parse(stream)
