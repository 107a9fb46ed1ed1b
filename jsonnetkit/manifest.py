"""Turning values into JSON text, and JSON or YAML text into values."""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

import yaml

from jsonnetkit.values import JsonnetError, type_name


def _format_number(number: float) -> str:
    """Shortest decimal form of ``number``, never in exponent notation."""
    if isinstance(number, int) and not isinstance(number, bool):
        return str(number)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "+Inf" if number > 0 else "-Inf"
    return format(Decimal(repr(float(number))).normalize(), "f")


def _encode_string(text: str) -> str:
    """A JSON string literal; HTML characters and non-ASCII are left as is."""
    parts = ['"']
    for char in text:
        code = ord(char)
        if char == '"':
            parts.append('\\"')
        elif char == "\\":
            parts.append("\\\\")
        elif char == "\n":
            parts.append("\\n")
        elif char == "\r":
            parts.append("\\r")
        elif char == "\t":
            parts.append("\\t")
        elif code < 0x20 or code in (0x2028, 0x2029):
            parts.append(f"\\u{code:04x}")
        elif 0xD800 <= code <= 0xDFFF:
            parts.append("\ufffd")
        else:
            parts.append(char)
    parts.append('"')
    return "".join(parts)


def _path_text(path: list[str]) -> str:
    return "[" + " ".join(path) + "]"


def _require_object(obj: Any) -> Mapping:
    if not isinstance(obj, Mapping):
        raise JsonnetError(f"Unexpected type {type_name(obj)}, expected object")
    return obj


def _scalar(value: Any, path: list[str]) -> str | None:
    """The JSON text of a non-container value, or None for containers."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return _format_number(value)
    if isinstance(value, str):
        return _encode_string(value)
    if isinstance(value, (list, tuple, Mapping)):
        return None
    if callable(value):
        raise JsonnetError(f"tried to manifest function at {_path_text(path)}")
    raise JsonnetError(f"unknown type to marshal to JSON: {type(value).__name__}")


def manifest_json_ex(
    value: Any, indent: str, newline: str = "\n", key_val_sep: str = ": "
) -> str:
    """Render ``value`` as JSON with the given indent, newline and separator."""

    def render(current: Any, path: list[str], cindent: str) -> str:
        scalar = _scalar(current, path)
        if scalar is not None:
            return scalar
        new_indent = cindent + indent
        if isinstance(current, Mapping):
            lines = []
            for name in sorted(current):
                rendered = render(current[name], [*path, name], new_indent)
                lines.append(new_indent + _encode_string(name) + key_val_sep + rendered)
            opening, closing = "{", "}"
        else:
            lines = [
                new_indent + render(item, [*path, str(position)], new_indent)
                for position, item in enumerate(current)
            ]
            opening, closing = "[", "]"
        body = ("," + newline).join(lines)
        return opening + newline + body + newline + cindent + closing

    return render(value, [], "")


def to_string(value: Any) -> str:
    """Strings unchanged; anything else as single-line JSON."""
    if isinstance(value, str):
        return value

    def render(current: Any, path: list[str]) -> str:
        scalar = _scalar(current, path)
        if scalar is not None:
            return scalar
        if isinstance(current, Mapping):
            if not current:
                return "{ }"
            items = (
                f"{_encode_string(name)}: {render(current[name], [*path, name])}"
                for name in sorted(current)
            )
            return "{" + ", ".join(items) + "}"
        if not current:
            return "[ ]"
        items = (render(item, [*path, str(pos)]) for pos, item in enumerate(current))
        return "[" + ", ".join(items) + "]"

    return render(value, [])


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid character {name!r} looking for beginning of value")


def parse_json(text: str) -> Any:
    """Parse JSON text; every number becomes a float."""
    try:
        return json.loads(text, parse_int=float, parse_constant=_reject_constant)
    except ValueError as exc:
        raise JsonnetError(f"failed to parse JSON: {exc}") from None


class _JsonYamlLoader(yaml.SafeLoader):
    """A safe loader that leaves timestamps as plain strings."""


_JsonYamlLoader.yaml_implicit_resolvers = {
    first: [
        (tag, pattern)
        for tag, pattern in resolvers
        if tag != "tag:yaml.org,2002:timestamp"
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _yaml_key(key: Any) -> str:
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, (int, float)):
        return _format_number(key)
    return str(key)


def _yaml_to_value(node: Any) -> Any:
    if node is None or isinstance(node, (bool, str)):
        return node
    if isinstance(node, (int, float)):
        number = float(node)
        if not math.isfinite(number):
            raise JsonnetError(f"failed to parse YAML: unsupported value {node}")
        return number
    if isinstance(node, Mapping):
        return {_yaml_key(key): _yaml_to_value(item) for key, item in node.items()}
    if isinstance(node, (list, tuple)):
        return [_yaml_to_value(item) for item in node]
    if isinstance(node, bytes):
        return node.decode("utf-8", errors="replace")
    return str(node)


def parse_yaml(text: str) -> Any:
    """Parse YAML text; text holding ``---`` gives a list of its documents."""
    try:
        documents = list(yaml.load_all(text, Loader=_JsonYamlLoader))
    except yaml.YAMLError as exc:
        raise JsonnetError(f"failed to parse YAML: {exc}") from None
    values = [_yaml_to_value(document) for document in documents]
    if "---" in text:
        return values
    return values[0] if values else None


def object_fields(obj: Any) -> list[str]:
    """The field names of ``obj`` in sorted order."""
    return sorted(_require_object(obj))


def object_has(obj: Any, name: Any) -> bool:
    """Whether ``obj`` has a field called ``name``."""
    fields = _require_object(obj)
    if not isinstance(name, str):
        raise JsonnetError(f"Unexpected type {type_name(name)}, expected string")
    return name in fields