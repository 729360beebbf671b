from .line_parser import (
    BaseLineParser,
    GoBenchLineParser,
    get_line_parser,
    set_line_parser,
)

__all__ = [
    "BaseLineParser",
    "GoBenchLineParser",
    "get_line_parser",
    "set_line_parser",
]
