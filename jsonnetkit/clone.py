"""Deep copies of AST trees."""

from __future__ import annotations

import copy
import dataclasses
from enum import Enum

from jsonnetkit.location import LocationRange, Source
from jsonnetkit.nodes import Node

_ATOMS = (str, int, float, bool, bytes, Enum, type(None))


def _is_frozen(obj: object) -> bool:
    params = getattr(type(obj), "__dataclass_params__", None)
    return bool(params is not None and params.frozen)


def _clone_value(value):
    if isinstance(value, _ATOMS):
        return value
    if isinstance(value, Source):
        # Source files are shared between the original and the clone.
        return value
    if isinstance(value, LocationRange):
        return copy.copy(value)
    if isinstance(value, list):
        return [_clone_value(item) for item in value]
    if isinstance(value, tuple):
        return tuple(_clone_value(item) for item in value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        if _is_frozen(value):
            return value
        result = copy.copy(value)
        for f in dataclasses.fields(value):
            setattr(result, f.name, _clone_value(getattr(value, f.name)))
        return result
    raise TypeError(f"clone() does not recognize value of type {type(value).__name__}")


def clone(node: Node | None) -> Node | None:
    """An independent deep copy of ``node``; source files stay shared."""
    if node is None:
        return None
    if not isinstance(node, Node):
        raise TypeError(f"clone() does not recognize ast: {type(node).__name__}")
    return _clone_value(node)