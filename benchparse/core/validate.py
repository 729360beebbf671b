# JSON schema validation of `go test -json` event envelopes.
from __future__ import annotations
from typing import Dict, Any, List, Optional
from jsonschema import Draft202012Validator, exceptions
import json
from pathlib import Path
from dataclasses import dataclass

# core/validate.py -> ../schema/test2json-event.json
DEFAULT_SCHEMA_PATH = Path(__file__).resolve().parent.parent / "schema" / "test2json-event.json"


def _location(error: exceptions.ValidationError) -> str:
    return " -> ".join(str(p) for p in error.path) if error.path else "root"


class EventValidator:
    def __init__(self, schema_path: str | Path = DEFAULT_SCHEMA_PATH):
        try:
            self.schema_path = Path(schema_path)
            self.schema = json.loads(self.schema_path.read_text(encoding="utf-8"))
            self.validator = Draft202012Validator(self.schema)
        except json.JSONDecodeError as e:
            raise ValueError(f"Schema file parsing error: {e}")
        except FileNotFoundError:
            raise FileNotFoundError(f"Schema file not found: {schema_path}")

    def is_valid(self, event: Dict[str, Any]) -> bool:
        return self.validator.is_valid(event)

    def iter_errors(self, event: Dict[str, Any]) -> List[str]:
        return [
            f"Validation error (location: {_location(error)}): {error.message}"
            for error in self.validator.iter_errors(event)
        ]


@dataclass
class ValidationResult:
    valid: bool
    error: Optional[str] = None


def validate_event(event: Any, validator: Optional[EventValidator] = None) -> ValidationResult:
    validator = validator or EventValidator()
    errors = validator.iter_errors(event)
    if not errors:
        return ValidationResult(valid=True)
    return ValidationResult(valid=False, error="; ".join(errors))
