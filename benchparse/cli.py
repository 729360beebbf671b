#!/usr/bin/env python3
"""Command-line interface for benchparse.

Usage:
    go test -bench . | python -m benchparse parse
    python -m benchparse parse bench.txt --filter "delta>0.01"
    python -m benchparse parse bench.json --json --format yaml
    python -m benchparse group bench.txt --by y,delta
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from contextlib import contextmanager
from dataclasses import replace
from typing import Any, Dict, Iterator, List, Optional, TextIO

import yaml

from .core.config import BenchParseConfig
from .core.engine import BenchParseEngine
from .core.errors import BenchParseError
from .core.results import Case, ResultList

OUTPUT_FORMATS = ("text", "json", "yaml")


def _split_names(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [s.strip() for s in raw.split(",") if s.strip()]


class BenchParseCLI:
    """Command-line operations over parsed benchmark output."""

    def __init__(self, config: Optional[BenchParseConfig] = None, out: Optional[TextIO] = None):
        self.config = config or BenchParseConfig.from_env()
        self.out = out or sys.stdout

    @contextmanager
    def _open(self, path: Optional[str]) -> Iterator[TextIO]:
        if path is None or path == "-":
            yield sys.stdin
            return
        with open(path, "r", encoding="utf-8") as f:
            yield f

    def load(self, path: Optional[str]) -> List[Case]:
        engine = BenchParseEngine(self.config)
        with self._open(path) as stream:
            return engine.parse(stream)

    def _results_doc(self, results: ResultList) -> List[Dict[str, Any]]:
        return [res.model_dump(mode="json") for res in results]

    def _emit(self, doc: Any, fmt: str) -> None:
        if fmt == "json":
            self.out.write(json.dumps(doc, indent=2, ensure_ascii=False) + "\n")
        else:
            self.out.write(yaml.safe_dump(doc, sort_keys=False, allow_unicode=True))

    def parse(self, path: Optional[str], filter_expr: Optional[str] = None, fmt: str = "text") -> int:
        cases = self.load(path)
        if filter_expr:
            cases = [Case(name=c.name, results=c.results.filter(filter_expr)) for c in cases]

        if fmt == "text":
            for case in cases:
                if len(case.results):
                    self.out.write(case.to_text(self.config.float_format) + "\n")
            return 0

        self._emit([{"name": c.name, "results": self._results_doc(c.results)} for c in cases], fmt)
        return 0

    def group(self, path: Optional[str], group_by: List[str], filter_expr: Optional[str] = None, fmt: str = "text") -> int:
        cases = self.load(path)
        doc = []
        for case in cases:
            results = case.results.filter(filter_expr) if filter_expr else case.results
            grouped = results.group(group_by, self.config.float_format)
            if fmt == "text":
                for key, bucket in grouped.items():
                    self.out.write(f"{case.name} [{key}]\n")
                    self.out.write(Case(name=case.name, results=bucket).to_text(self.config.float_format) + "\n")
                continue
            doc.append({
                "name": case.name,
                "groups": {key: self._results_doc(bucket) for key, bucket in grouped.items()},
            })
        if fmt != "text":
            self._emit(doc, fmt)
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="benchparse",
        description="Parse, filter and group Go benchmark output",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("input", nargs="?", default="-", help="Benchmark output file (default: stdin)")
    common.add_argument("--json", action="store_true", help="Input is `go test -json` output")
    common.add_argument("--filter", help="Filter expression (e.g., 'delta>0.01')")
    common.add_argument("--format", choices=OUTPUT_FORMATS, default="text", help="Output format")
    common.add_argument("--prefix", default=None, help="Top-level benchmark name prefix (default: from BENCHPARSE_CASE_PREFIX env or 'Benchmark')")
    common.add_argument("--validate-events", action="store_true", default=None,
                        help="Validate JSON events against the test2json schema")
    common.add_argument("--log-level", default=None, help="Logging level (default: from BENCHPARSE_LOG_LEVEL env or INFO)")

    subparsers.add_parser("parse", parents=[common], help="Print parsed benchmarks")
    group_parser = subparsers.add_parser("group", parents=[common], help="Group results by input variables")
    group_parser.add_argument("--by", default="", help="Comma-separated variable names (e.g., 'y,delta')")
    return parser


def _config_from_args(args: argparse.Namespace) -> BenchParseConfig:
    overrides: Dict[str, Any] = {}
    if args.json:
        overrides["input_format"] = "json"
    if args.prefix:
        overrides["case_prefix"] = args.prefix
    if args.validate_events:
        overrides["validate_events"] = True
    if args.log_level:
        overrides["log_level"] = args.log_level
    return replace(BenchParseConfig.from_env(), **overrides)


def main(argv: Optional[List[str]] = None, out: Optional[TextIO] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        config = _config_from_args(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    logging.basicConfig(level=config.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    cli = BenchParseCLI(config, out=out)
    try:
        if args.command == "parse":
            return cli.parse(args.input, filter_expr=args.filter, fmt=args.format)
        if args.command == "group":
            return cli.group(args.input, _split_names(args.by), filter_expr=args.filter, fmt=args.format)
        parser.print_help()
        return 0
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except (BenchParseError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
