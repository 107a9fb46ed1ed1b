"""Runtime values and the checks shared by the built-in functions.

Values are plain Python data: ``None`` is null, ``bool`` is boolean,
``int``/``float`` are numbers, ``str`` is a string, ``list`` is an array,
``dict`` with string keys is an object and any callable is a function.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any


class JsonnetError(Exception):
    """An error raised while evaluating or manifesting a value."""


def type_name(value: Any) -> str:
    """The language-level name of the type of ``value``."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    if callable(value):
        return "function"
    raise TypeError(f"not a value: {type(value).__name__}")


def check_number(value: Any) -> float:
    """``value`` as a float, rejecting non-numbers, NaN and infinities."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise JsonnetError(f"Unexpected type {type_name(value)}, expected number")
    result = float(value)
    if math.isnan(result):
        raise JsonnetError("Not a number")
    if math.isinf(result):
        raise JsonnetError("Overflow")
    return result