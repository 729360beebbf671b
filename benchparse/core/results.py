"""
Collections of benchmark results: filtering and grouping.
"""
from __future__ import annotations
import logging
from typing import Dict, Iterator, List, Sequence
from pydantic import BaseModel, Field, RootModel

from .compare import compare
from .errors import ComparisonError, DifferentNamesError
from .filters import parse_filter
from .models import DEFAULT_FLOAT_FORMAT, ResultEntry

logger = logging.getLogger("benchparse.results")


class ResultList(RootModel):
    """Results of one top-level benchmark, in the order they were read."""
    root: List[ResultEntry] = Field(default_factory=list)

    def __len__(self):
        return len(self.root)

    def __getitem__(self, index):
        return self.root[index]

    def __iter__(self) -> Iterator[ResultEntry]:
        return iter(self.root)

    def append(self, entry: ResultEntry) -> None:
        self.root.append(entry)

    def filter(self, expr: str) -> "ResultList":
        """
        Return the results with a variable matching ``expr``.

        Args:
            expr: a filter expression such as 'delta>0.01' or 'y==sin(x)'

        Raises:
            MalformedFilterError: ``expr`` has no recognised operator
            ComparisonError: a variable of the filtered name could not be
                compared with the filter value
        """
        parsed = parse_filter(expr)
        target = parsed.as_variable()
        filtered: List[ResultEntry] = []
        for res in self.root:
            for variable in res.inputs.variables:
                try:
                    include = compare(parsed.operator, variable, target)
                except ComparisonError as e:
                    if not e.is_a(DifferentNamesError):
                        raise
                    continue
                if include:
                    filtered.append(res)
                    break
        logger.debug(f"Filter '{expr}' kept {len(filtered)} of {len(self.root)} results")
        return ResultList(filtered)

    def group(self, group_by: Sequence[str], float_format: str = DEFAULT_FLOAT_FORMAT) -> Dict[str, "ResultList"]:
        """
        Group results by the values of the named variables.

        Keys join the matched 'name=value' pairs with commas, in the order
        the variables appear in the benchmark name, with float values
        rendered using ``float_format``. Results missing any of the
        ``group_by`` variables are left out.
        """
        wanted = set(group_by)
        grouped: Dict[str, ResultList] = {}
        for res in self.root:
            matched = [v for v in res.inputs.variables if v.name in wanted]
            if len(matched) < len(group_by) or not wanted <= {v.name for v in matched}:
                continue
            key = ",".join(v.render(float_format) for v in matched)
            grouped.setdefault(key, ResultList()).append(res)
        return grouped


class Case(BaseModel):
    """A top-level benchmark and its results."""
    name: str
    results: ResultList = Field(default_factory=ResultList)

    def to_text(self, float_format: str = DEFAULT_FLOAT_FORMAT) -> str:
        """Render in the same format as the testing.B output, one line per result."""
        return "\n".join(
            f"{self.name}{res.inputs.render(float_format)} {res.outputs.render()}"
            for res in self.results
        )

    def __str__(self) -> str:
        return self.to_text()
