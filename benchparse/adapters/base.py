# benchparse/adapters/base.py
"""
Input Adapter Base Module

Adapters turn a raw input stream into the text lines handed to the line
parser. Concrete adapters exist for plain testing.B output and for
`go test -json` event streams.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterable, Iterator


class BaseLineAdapter(ABC):
    """
    Line Adapter Base Class
    """

    @abstractmethod
    def iter_lines(self, stream: Iterable[str]) -> Iterator[str]:
        """
        Yield benchmark output lines from ``stream``

        Args:
            stream: any iterable of text lines (an open file, io.StringIO, a list)

        Raises:
            EventDecodeError: when the stream format is structured and a line cannot be decoded
        """


def strip_newline(line: str) -> str:
    return line.rstrip("\r\n")
