from __future__ import annotations
import copy
import math
from datetime import datetime, timezone
from typing import Any, TypeVar

T = TypeVar("T")

def now_iso() -> str:
    # Millisecond precision with a trailing Z
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

def parse_iso(value: str) -> datetime:
    """
    Parse an ISO-8601 date or date-time string (Python 3.11 fromisoformat rules, "Z" included).
    Surrounding whitespace is not tolerated. Raises ValueError when the text is not one.
    """
    return datetime.fromisoformat(value)

def deep_copy(obj: T) -> T:
    return copy.deepcopy(obj)

def is_number(value: Any) -> bool:
    # bool is a subclass of int but never counts as a number; NaN/Infinity are not JSON
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not isinstance(value, float) or math.isfinite(value)

def is_json_value(value: Any) -> bool:
    """
    True when `value` survives a JSON dump/load unchanged: str keys only, lists not tuples,
    finite numbers.
    """
    if value is None or isinstance(value, (str, bool)):
        return True
    if isinstance(value, (int, float)):
        return is_number(value)
    if isinstance(value, list):
        return all(is_json_value(v) for v in value)
    if isinstance(value, dict):
        return all(isinstance(k, str) and is_json_value(v) for k, v in value.items())
    return False
