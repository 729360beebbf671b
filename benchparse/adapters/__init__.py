from .base import BaseLineAdapter
from .text_adapter import TextLineAdapter
from .json_adapter import BenchEvent, JSONEventAdapter


def create_adapter(input_format: str = "text", validate_events: bool = False) -> BaseLineAdapter:
    if input_format == "text":
        return TextLineAdapter()
    if input_format == "json":
        return JSONEventAdapter(validate_events=validate_events)
    raise ValueError(f"Unsupported input format: {input_format}")


__all__ = [
    "BaseLineAdapter",
    "TextLineAdapter",
    "JSONEventAdapter",
    "BenchEvent",
    "create_adapter",
]
