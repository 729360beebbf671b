"""
Decomposition of full benchmark names.

A name has the form ``<TopLevel>(/<component>)*(-<width>)?``. Components of
the form ``name=value`` become NamedVariables, everything else becomes a
PathSegment; the trailing ``-<width>`` is the GOMAXPROCS value the benchmark
ran with.
"""
from __future__ import annotations
import re
from functools import lru_cache
from typing import List, Tuple

from .errors import MalformedNameError
from .models import CaseInputs, NamedVariable, PathSegment
from .values import infer

DEFAULT_CASE_PREFIX = "Benchmark"


@lru_cache(maxsize=16)
def _name_pattern(prefix: str) -> re.Pattern[str]:
    # lazy body so a trailing -N is left for the width group
    return re.compile(rf"^({re.escape(prefix)}.+?)(?:-([0-9]+))?$", re.DOTALL)


def decompose(full_name: str, prefix: str = DEFAULT_CASE_PREFIX) -> Tuple[str, CaseInputs]:
    """Split ``full_name`` into its top-level name and CaseInputs."""
    match = _name_pattern(prefix).match(full_name)
    if match is None:
        raise MalformedNameError(full_name, f"does not start with '{prefix}'")

    info, width = match.group(1), match.group(2)
    concurrency = 1
    if width:
        try:
            concurrency = int(width)
        except ValueError as e:
            raise MalformedNameError(full_name, f"error parsing concurrency: {e}") from e

    components = info.split("/")
    variables: List[NamedVariable] = []
    segments: List[PathSegment] = []
    for i, component in enumerate(components[1:], start=1):
        split = component.split("=")
        if len(split) == 2:
            variables.append(NamedVariable(name=split[0], value=infer(split[1]), position=i))
        else:
            segments.append(PathSegment(name=component, position=i))

    return components[0], CaseInputs(variables=variables, segments=segments, concurrency=concurrency)
