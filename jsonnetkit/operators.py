"""Operators and numeric built-in functions over plain runtime values."""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from typing import Any

from jsonnetkit.manifest import to_string
from jsonnetkit.values import JsonnetError, check_number, type_name

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
# Bounds as floats, the way a float argument is compared with them.
_INT64_MIN_F = float(_INT64_MIN)
_INT64_MAX_F = float(_INT64_MAX)


# ---------------------------------------------------------------------------
# Helpers


def _type_error(value: Any, expected: str | None = None) -> JsonnetError:
    if expected is None:
        return JsonnetError(f"Unexpected type {type_name(value)}")
    return JsonnetError(f"Unexpected type {type_name(value)}, expected {expected}")


def _number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _type_error(value, "number")
    return float(value)


def _boolean(value: Any) -> bool:
    if not isinstance(value, bool):
        raise _type_error(value, "boolean")
    return value


def _string(value: Any) -> str:
    if not isinstance(value, str):
        raise _type_error(value, "string")
    return value


def _array(value: Any) -> list:
    if not isinstance(value, (list, tuple)):
        raise _type_error(value, "array")
    return list(value)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _to_int64(value: float) -> int:
    """Truncate towards zero and wrap into the signed 64-bit range."""
    return ((int(value) - _INT64_MIN) % 2**64) + _INT64_MIN


def _format_number(value: float) -> str:
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def _sign(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def _apply(func: Callable[[float], float], x: Any) -> float:
    """Apply a float function, raising where the result is NaN or infinite."""
    value = _number(x)
    try:
        result = func(value)
    except ValueError:
        raise JsonnetError("Not a number") from None
    except OverflowError:
        raise JsonnetError("Overflow") from None
    return check_number(result)


# ---------------------------------------------------------------------------
# Arithmetic


def plus(x: Any, y: Any) -> Any:
    """``x + y`` for numbers, strings, arrays and objects."""
    if isinstance(y, str):
        return to_string(x) + y
    if _is_number(x):
        return check_number(float(x) + _number(y))
    if isinstance(x, str):
        return x + to_string(y)
    if isinstance(x, Mapping):
        if not isinstance(y, Mapping):
            raise _type_error(y, "object")
        merged = dict(x)
        merged.update(y)
        return merged
    if isinstance(x, (list, tuple)):
        return list(x) + _array(y)
    raise _type_error(x)


def minus(x: Any, y: Any) -> float:
    """``x - y``."""
    return check_number(_number(x) - _number(y))


def multiply(x: Any, y: Any) -> float:
    """``x * y``."""
    return check_number(_number(x) * _number(y))


def divide(x: Any, y: Any) -> float:
    """``x / y``; dividing by zero raises."""
    left, right = _number(x), _number(y)
    if right == 0:
        raise JsonnetError("Division by zero.")
    return check_number(left / right)


def modulo(x: Any, y: Any) -> float:
    """Floating remainder whose sign follows ``x``."""
    left, right = _number(x), _number(y)
    if right == 0:
        raise JsonnetError("Division by zero.")
    return check_number(math.fmod(left, right))


def power(base: Any, exponent_value: Any) -> float:
    """``base`` raised to ``exponent_value``."""
    b, e = _number(base), _number(exponent_value)
    try:
        result = math.pow(b, e)
    except ValueError:
        if b == 0 and e < 0:
            raise JsonnetError("Overflow") from None
        raise JsonnetError("Not a number") from None
    except OverflowError:
        raise JsonnetError("Overflow") from None
    return check_number(result)


# ---------------------------------------------------------------------------
# Comparison


def compare(x: Any, y: Any) -> int:
    """-1, 0 or 1 comparing numbers, strings or arrays."""
    if _is_number(x):
        return _sign(float(x), _number(y))
    if isinstance(x, str):
        return _sign(x, _string(y))
    if isinstance(x, (list, tuple)):
        right = _array(y)
        for left_item, right_item in zip(x, right):
            result = compare(left_item, right_item)
            if result != 0:
                return result
        return _sign(len(x), len(right))
    raise _type_error(x)


def less(x: Any, y: Any) -> bool:
    """``x < y``."""
    return compare(x, y) == -1


def greater(x: Any, y: Any) -> bool:
    """``x > y``."""
    return compare(x, y) == 1


def less_eq(x: Any, y: Any) -> bool:
    """``x <= y``."""
    return compare(x, y) <= 0


def greater_eq(x: Any, y: Any) -> bool:
    """``x >= y``."""
    return compare(x, y) >= 0


def equals(x: Any, y: Any) -> bool:
    """Deep equality; comparing functions raises."""
    kind = type_name(x)
    if kind != type_name(y):
        return False
    if kind == "function":
        raise JsonnetError("Cannot test equality of functions")
    if kind == "null":
        return True
    if kind == "number":
        return float(x) == float(y)
    if kind in ("boolean", "string"):
        return x == y
    if kind == "array":
        return len(x) == len(y) and all(equals(a, b) for a, b in zip(x, y))
    if sorted(x) != sorted(y):
        return False
    return all(equals(x[name], y[name]) for name in sorted(x))


def not_equals(x: Any, y: Any) -> bool:
    """Negation of :func:`equals`."""
    return not equals(x, y)


def primitive_equals(x: Any, y: Any) -> bool:
    """Equality restricted to null, booleans, numbers and strings."""
    kind = type_name(x)
    if kind != type_name(y):
        return False
    if kind == "null":
        return True
    if kind == "number":
        return float(x) == float(y)
    if kind in ("boolean", "string"):
        return x == y
    if kind == "function":
        raise JsonnetError("Cannot test equality of functions")
    raise JsonnetError(f"primitiveEquals operates on primitive types, got {kind}")


# ---------------------------------------------------------------------------
# Unary operators


def negate(x: Any) -> bool:
    """Logical not."""
    return not _boolean(x)


def bit_not(x: Any) -> float:
    """Bitwise complement of the 64-bit integer part of ``x``."""
    return float(~_to_int64(_number(x)))


def unary_plus(x: Any) -> float:
    """``+x``."""
    return _number(x)


def unary_minus(x: Any) -> float:
    """``-x``."""
    return -_number(x)


# ---------------------------------------------------------------------------
# Bitwise operators


def _bitwise(
    func: Callable[[int, int], int], positive_right: bool, x: Any, y: Any
) -> float:
    left, right = _number(x), _number(y)
    for value in (left, right):
        if value < _INT64_MIN_F or value > _INT64_MAX_F:
            raise JsonnetError(
                f"Bitwise operator argument {_format_number(value)} outside of "
                f"range [{_INT64_MIN}, {_INT64_MAX}]"
            )
    if positive_right and right < 0:
        raise JsonnetError("Shift by negative exponent.")
    result = func(_to_int64(left), _to_int64(right))
    return check_number(float(_to_int64(result)))


def shift_left(x: Any, y: Any) -> float:
    """``x << y`` on 64-bit integers."""
    return _bitwise(lambda a, b: a << (b % 64), True, x, y)


def shift_right(x: Any, y: Any) -> float:
    """Arithmetic ``x >> y`` on 64-bit integers."""
    return _bitwise(lambda a, b: a >> (b % 64), True, x, y)


def bitwise_and(x: Any, y: Any) -> float:
    """``x & y`` on 64-bit integers."""
    return _bitwise(lambda a, b: a & b, False, x, y)


def bitwise_or(x: Any, y: Any) -> float:
    """``x | y`` on 64-bit integers."""
    return _bitwise(lambda a, b: a | b, False, x, y)


def bitwise_xor(x: Any, y: Any) -> float:
    """``x ^ y`` on 64-bit integers."""
    return _bitwise(lambda a, b: a ^ b, False, x, y)


# ---------------------------------------------------------------------------
# Numeric functions


def _log(value: float) -> float:
    if value == 0:
        raise OverflowError("log of zero")
    return math.log(value)


def sqrt(x: Any) -> float:
    """Square root."""
    return _apply(math.sqrt, x)


def ceil(x: Any) -> float:
    """Smallest integer not below ``x``."""
    return _apply(lambda v: float(math.ceil(v)), x)


def floor(x: Any) -> float:
    """Largest integer not above ``x``."""
    return _apply(lambda v: float(math.floor(v)), x)


def sin(x: Any) -> float:
    """Sine."""
    return _apply(math.sin, x)


def cos(x: Any) -> float:
    """Cosine."""
    return _apply(math.cos, x)


def tan(x: Any) -> float:
    """Tangent."""
    return _apply(math.tan, x)


def asin(x: Any) -> float:
    """Arc sine."""
    return _apply(math.asin, x)


def acos(x: Any) -> float:
    """Arc cosine."""
    return _apply(math.acos, x)


def atan(x: Any) -> float:
    """Arc tangent."""
    return _apply(math.atan, x)


def log(x: Any) -> float:
    """Natural logarithm."""
    return _apply(_log, x)


def exp(x: Any) -> float:
    """``e`` raised to ``x``."""
    return _apply(math.exp, x)


def mantissa(x: Any) -> float:
    """Mantissa of ``x`` as returned by frexp."""
    return _apply(lambda v: math.frexp(v)[0], x)


def exponent(x: Any) -> float:
    """Binary exponent of ``x`` as returned by frexp."""
    return _apply(lambda v: float(math.frexp(v)[1]), x)


# ---------------------------------------------------------------------------
# Length


def _required_parameters(func: Callable) -> int:
    bound = False
    target: Any = func
    if not hasattr(target, "__code__"):
        if hasattr(target, "__func__"):
            target = target.__func__
            bound = True
        else:
            call = getattr(type(target), "__call__", None)
            if call is not None and hasattr(call, "__code__"):
                target = call
                bound = True
    code = getattr(target, "__code__", None)
    if code is None:
        raise JsonnetError("Cannot inspect the parameters of a function")
    positional = code.co_argcount
    defaults = target.__defaults__ or ()
    required = positional - len(defaults)
    if bound and positional > 0 and required > 0:
        required -= 1
    kw_defaults = target.__kwdefaults__ or {}
    kw_names = code.co_varnames[positional:positional + code.co_kwonlyargcount]
    required += sum(1 for name in kw_names if name not in kw_defaults)
    return max(required, 0)


def length(x: Any) -> float:
    """Fields of an object, items of an array, characters of a string,
    or required parameters of a function."""
    if isinstance(x, Mapping):
        return float(len(x))
    if isinstance(x, (list, tuple, str)):
        return float(len(x))
    if callable(x):
        return float(_required_parameters(x))
    raise _type_error(x)