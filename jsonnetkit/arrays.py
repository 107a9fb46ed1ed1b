"""Array built-in functions."""

from __future__ import annotations

import functools
import math
from collections.abc import Callable
from typing import Any

from jsonnetkit.operators import compare
from jsonnetkit.values import JsonnetError, type_name


def _type_error(value: Any, expected: str) -> JsonnetError:
    return JsonnetError(f"Unexpected type {type_name(value)}, expected {expected}")


def _array(value: Any) -> list:
    if not isinstance(value, (list, tuple)):
        raise _type_error(value, "array")
    return list(value)


def _function(value: Any) -> Callable:
    if isinstance(value, (str, list, tuple, dict)) or not callable(value):
        raise _type_error(value, "function")
    return value


def _integer(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _type_error(value, "number")
    number = float(value)
    if not math.isfinite(number) or not number.is_integer():
        raise JsonnetError(f"Expected an integer, but got {value}")
    return int(number)


def _identity(value: Any) -> Any:
    return value


def join(sep: Any, items: Any) -> Any:
    """Join strings or arrays with ``sep``, skipping nulls."""
    elements = _array(items)
    if isinstance(sep, str):
        pieces = []
        for element in elements:
            if element is None:
                continue
            if not isinstance(element, str):
                raise _type_error(element, "string")
            pieces.append(element)
        return sep.join(pieces)
    if isinstance(sep, (list, tuple)):
        result: list = []
        first = True
        for element in elements:
            if element is None:
                continue
            if not isinstance(element, (list, tuple)):
                raise _type_error(element, "array")
            if not first:
                result.extend(sep)
            result.extend(element)
            first = False
        return result
    raise JsonnetError(
        f"join first parameter should be string or array, got {type_name(sep)}"
    )


def reverse(items: Any) -> list:
    """The elements of an array in reverse order."""
    return _array(items)[::-1]


def make_array(size: Any, func: Any) -> list:
    """``[func(0), func(1), ..., func(size - 1)]``."""
    count = _integer(size)
    function = _function(func)
    return [function(float(position)) for position in range(count)]


def flat_map(func: Any, items: Any) -> Any:
    """Map ``func`` over an array or the characters of a string and concatenate."""
    function = _function(func)
    if isinstance(items, (list, tuple)):
        result: list = []
        for element in items:
            returned = function(element)
            result.extend(_array(returned))
        return result
    if isinstance(items, str):
        pieces = []
        for character in items:
            returned = function(character)
            if not isinstance(returned, str):
                raise _type_error(returned, "string")
            pieces.append(returned)
        return "".join(pieces)
    raise JsonnetError(
        f"std.flatMap second param must be array / string, got {type_name(items)}"
    )


def filter_array(func: Any, items: Any) -> list:
    """The elements of ``items`` for which ``func`` returns true."""
    elements = _array(items)
    function = _function(func)
    result = []
    for element in elements:
        included = function(element)
        if not isinstance(included, bool):
            raise _type_error(included, "boolean")
        if included:
            result.append(element)
    return result


def make_range(start: Any, stop: Any) -> list[float]:
    """The numbers from ``start`` to ``stop`` inclusive."""
    first = _integer(start)
    last = _integer(stop)
    return [float(number) for number in range(first, last + 1)]


def sort_array(items: Any, key: Any = _identity) -> list:
    """A stable sort of ``items`` by ``key`` of each element."""
    elements = _array(items)
    key_function = _function(key)
    keyed = [(key_function(element), element) for element in elements]
    ordered = sorted(
        keyed, key=functools.cmp_to_key(lambda a, b: compare(a[0], b[0]))
    )
    return [element for _, element in ordered]