"""String built-in functions: slicing, splitting, code points, hashing and encodings."""

from __future__ import annotations

import base64
import binascii
import hashlib
import math
import re
from decimal import Decimal
from typing import Any

from jsonnetkit.values import JsonnetError, type_name

_CODEPOINT_MAX = 0x10FFFF
_SURROGATES = re.compile("[\ud800-\udfff]")


# ---------------------------------------------------------------------------
# Helpers


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _string(value: Any) -> str:
    if not isinstance(value, str):
        raise JsonnetError(f"Unexpected type {type_name(value)}, expected string")
    return value


def _number(value: Any) -> float:
    if not _is_number(value):
        raise JsonnetError(f"Unexpected type {type_name(value)}, expected number")
    return float(value)


def _integer(value: Any) -> int:
    number = _number(value)
    if not math.isfinite(number) or not number.is_integer():
        raise JsonnetError(f"Expected an integer, but got {_format_float(number)}")
    return int(number)


def _utf8(text: str) -> bytes:
    """UTF-8 bytes of ``text``; lone surrogates become U+FFFD."""
    return _SURROGATES.sub("\ufffd", text).encode("utf-8")


def _format_float(value: float) -> str:
    """Shortest form of ``value``, switching to exponent form outside [1e-4, 1e6)."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    sign, digit_tuple, exp = Decimal(repr(float(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    point = len(digits) + exp
    exponent = point - 1
    prefix = "-" if sign else ""
    if exponent < -4 or exponent >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign = "-" if exponent < 0 else "+"
        return f"{prefix}{mantissa}e{exp_sign}{abs(exponent):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return f"{prefix}{digits}{'0' * (point - len(digits))}"
    return f"{prefix}{digits[:point]}.{digits[point:]}"


# ---------------------------------------------------------------------------
# Slicing, splitting and replacing


def substr(text: Any, start: Any, count: Any) -> str:
    """At most ``count`` characters of ``text`` starting at ``start``."""
    if not isinstance(text, str):
        raise JsonnetError(
            f"substr first parameter should be a string, got {type_name(text)}"
        )
    if not _is_number(start):
        raise JsonnetError(
            f"substr second parameter should be a number, got {type_name(start)}"
        )
    start_f = float(start)
    if not math.isfinite(start_f) or not start_f.is_integer():
        raise JsonnetError(
            f"substr second parameter should be an integer, got {start_f:f}"
        )
    if start_f < 0:
        raise JsonnetError(
            f"substr second parameter should be greater than zero, got {start_f:f}"
        )
    if not _is_number(count):
        raise JsonnetError(
            f"substr third parameter should be a number, got {type_name(count)}"
        )
    count_f = float(count)
    if not math.isfinite(count_f) or not count_f.is_integer():
        raise JsonnetError(
            f"substr third parameter should be an integer, got {count_f:f}"
        )
    count_i = int(count_f)
    if count_i < 0:
        raise JsonnetError(
            f"substr third parameter should be greater than zero, got {count_i}"
        )
    begin = int(start_f)
    return text[begin : begin + count_i]


def split_limit(text: Any, sep: Any, max_splits: Any) -> list[str]:
    """Split ``text`` on ``sep`` at most ``max_splits`` times (-1 for no limit)."""
    value = _string(text)
    separator = _string(sep)
    limit = _integer(max_splits)
    if limit < -1:
        raise JsonnetError(
            f"std.splitLimit third parameter should be -1 or non-negative, got {limit}"
        )
    width = len(_utf8(separator))
    if width != 1:
        raise JsonnetError(
            f"std.splitLimit second parameter should have length 1, got {width}"
        )
    return value.split(separator, limit)


def str_replace(text: Any, old: Any, new: Any) -> str:
    """Replace every occurrence of ``old`` in ``text`` with ``new``."""
    value = _string(text)
    source = _string(old)
    target = _string(new)
    if not source:
        raise JsonnetError("'from' string must not be zero length.")
    return value.replace(source, target)


# ---------------------------------------------------------------------------
# Code points


def char(n: Any) -> str:
    """The one-character string for code point ``n``."""
    number = _number(n)
    if number > _CODEPOINT_MAX:
        raise JsonnetError(f"Invalid unicode codepoint, got {_format_float(number)}")
    if number < 0:
        raise JsonnetError(f"Codepoints must be >= 0, got {_format_float(number)}")
    point = int(number)
    if 0xD800 <= point <= 0xDFFF:
        return "\ufffd"
    return chr(point)


def codepoint(text: Any) -> float:
    """The code point of a one-character string."""
    value = _string(text)
    if len(value) != 1:
        raise JsonnetError(
            f"codepoint takes a string of length 1, got length {len(value)}"
        )
    return float(ord(value))


# ---------------------------------------------------------------------------
# Hashing and encodings


def md5(text: Any) -> str:
    """Hex MD5 digest of the UTF-8 bytes of ``text``."""
    return hashlib.md5(_utf8(_string(text))).hexdigest()


def _byte_check(value: int) -> None:
    if value < 0 or value > 255:
        raise JsonnetError(
            "base64 encountered invalid codepoint value in the array "
            f"(must be 0 <= X <= 255), got {value}"
        )


def base64_encode(data: Any) -> str:
    """Base64 of a string of byte-sized characters or an array of bytes."""
    if isinstance(data, str):
        for character in data:
            _byte_check(ord(character))
        raw = _utf8(data)
    elif isinstance(data, (list, tuple)):
        collected = bytearray()
        for item in data:
            try:
                number = _integer(item)
            except JsonnetError:
                raise JsonnetError(
                    "base64 encountered a non-integer value in the array, "
                    f"got {type_name(item)}"
                ) from None
            _byte_check(number)
            collected.append(number)
        raw = bytes(collected)
    else:
        raise JsonnetError(
            "base64 can only base64 encode strings / arrays of single bytes, "
            f"got {type_name(data)}"
        )
    return base64.b64encode(raw).decode("ascii")


def _decode(text: Any) -> bytes:
    if not isinstance(text, str):
        raise JsonnetError(f"base64DecodeBytes requires a string, got {type_name(text)}")
    size = len(_utf8(text))
    if size % 4 != 0:
        raise JsonnetError(
            "input string appears not to be a base64 encoded string. "
            f"Wrong length found ({size})"
        )
    try:
        return base64.b64decode(text.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError, ValueError) as exc:
        raise JsonnetError(f"failed to decode: {exc}") from None


def base64_decode(text: Any) -> str:
    """Decode base64 text into a string."""
    return _decode(text).decode("utf-8", errors="replace")


def base64_decode_bytes(text: Any) -> list[float]:
    """Decode base64 text into an array of bytes."""
    return [float(byte) for byte in _decode(text)]


def encode_utf8(text: Any) -> list[float]:
    """The UTF-8 bytes of a string as an array of numbers."""
    return [float(byte) for byte in _utf8(_string(text))]


def decode_utf8(data: Any) -> str:
    """A string from an array of UTF-8 bytes."""
    if not isinstance(data, (list, tuple)):
        raise JsonnetError(f"Unexpected type {type_name(data)}, expected array")
    collected = bytearray()
    for item in data:
        number = _integer(item)
        if number < 0 or number > 255:
            raise JsonnetError(f"Bytes must be integers in range [0, 255], got {number}")
        collected.append(number)
    return bytes(collected).decode("utf-8", errors="replace")