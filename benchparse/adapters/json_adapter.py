"""
Adapter for `go test -json` output.

Each input line is one JSON event; the benchmark output line is carried in
the event's Output field. Any line that is not a valid event is an error.
"""
from __future__ import annotations
from typing import Iterable, Iterator, Optional
import json
import logging
from pydantic import BaseModel, Field, ValidationError

from benchparse.core.errors import EventDecodeError
from benchparse.core.validate import EventValidator
from .base import BaseLineAdapter, strip_newline

logger = logging.getLogger("benchparse.adapters")


class BenchEvent(BaseModel):
    """A single event emitted by `go test -json`."""
    model_config = {"populate_by_name": True, "extra": "ignore"}

    time: Optional[str] = Field(default=None, alias="Time")  # RFC3339
    action: str = Field(default="", alias="Action")
    package: str = Field(default="", alias="Package")
    test: str = Field(default="", alias="Test")
    elapsed: float = Field(default=0.0, alias="Elapsed")  # seconds
    output: str = Field(default="", alias="Output")


class JSONEventAdapter(BaseLineAdapter):
    def __init__(self, validate_events: bool = False, validator: Optional[EventValidator] = None):
        self.validate_events = validate_events
        self.validator = validator
        if validate_events and validator is None:
            self.validator = EventValidator()

    def decode(self, line: str, line_number: int = 0) -> BenchEvent:
        try:
            raw = json.loads(line)
        except json.JSONDecodeError as e:
            raise EventDecodeError(line_number, str(e)) from e
        if not isinstance(raw, dict):
            raise EventDecodeError(line_number, f"expected a JSON object, got {type(raw).__name__}")
        if self.validate_events:
            errors = self.validator.iter_errors(raw)
            if errors:
                raise EventDecodeError(line_number, "; ".join(errors))
        try:
            return BenchEvent.model_validate(raw)
        except ValidationError as e:
            raise EventDecodeError(line_number, str(e)) from e

    def iter_lines(self, stream: Iterable[str]) -> Iterator[str]:
        decoded = 0
        for line_number, line in enumerate(stream, start=1):
            event = self.decode(strip_newline(line), line_number)
            decoded += 1
            yield strip_newline(event.output)
        logger.debug(f"Decoded {decoded} test events")
