from __future__ import annotations
from typing import Iterable, Iterator

from .base import BaseLineAdapter, strip_newline


class TextLineAdapter(BaseLineAdapter):
    """Plain testing.B output; every line is passed through as-is."""

    def iter_lines(self, stream: Iterable[str]) -> Iterator[str]:
        for line in stream:
            yield strip_newline(line)
