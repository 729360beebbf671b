"""
Value typing for ``name=value`` benchmark inputs.

``infer`` tries each conversion in turn and keeps the first that succeeds:
integer, then float, then boolean, falling back to text.
"""
from __future__ import annotations
import re
from typing import Any, Callable, List, Optional

from .models import (
    BoolValue,
    FloatValue,
    IntValue,
    TextValue,
    TypedValue,
    INT64_MAX,
    INT64_MIN,
)

_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_FLOAT_RE = re.compile(
    r"^[+-]?(?:"
    r"(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|inf|infinity|nan"
    r")$",
    re.IGNORECASE,
)


def _as_int(token: str) -> Optional[TypedValue]:
    if not _INT_RE.match(token):
        return None
    number = int(token)
    if number < INT64_MIN or number > INT64_MAX:
        return None
    return IntValue(value=number)


def _as_float(token: str) -> Optional[TypedValue]:
    if not _FLOAT_RE.match(token):
        return None
    return FloatValue(value=float(token))


def _as_bool(token: str) -> Optional[TypedValue]:
    if token == "true":
        return BoolValue(value=True)
    if token == "false":
        return BoolValue(value=False)
    return None


_CONVERSIONS: List[Callable[[str], Optional[TypedValue]]] = [_as_int, _as_float, _as_bool]


def infer(token: str) -> TypedValue:
    for conv in _CONVERSIONS:
        typed = conv(token)
        if typed is not None:
            return typed
    return TextValue(value=token)


def typed(value: Any) -> TypedValue:
    """Wrap a native Python scalar in the matching TypedValue variant."""
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return BoolValue(value=value)
    if isinstance(value, int):
        return IntValue(value=value)
    if isinstance(value, float):
        return FloatValue(value=value)
    if isinstance(value, str):
        return TextValue(value=value)
    raise TypeError(f"Unsupported value type: {type(value).__name__}")
