from __future__ import annotations

import math
import re

from .types import BlArray, BlBool, BlBuiltin, BlClosure, BlNumber, BlValue, BellaTypeError, kind_name

def same_kind(lhs: BlValue, rhs: BlValue) -> bool:
    return kind_name(lhs) == kind_name(rhs)

def bl_equals(lhs: BlValue, rhs: BlValue) -> bool:
    """Structural equality; operands must already be of the same kind."""
    match (lhs, rhs):
        case (BlNumber(value=a), BlNumber(value=b)):
            return a == b
        case (BlBool(value=a), BlBool(value=b)):
            return a == b
        case (BlArray(items=a), BlArray(items=b)):
            if len(a) != len(b):
                return False
            return all(same_kind(x, y) and bl_equals(x, y) for x, y in zip(a, b))
        case (BlClosure() | BlBuiltin(), BlClosure() | BlBuiltin()):
            return lhs is rhs
        case _:
            return False

_EXPONENT_PADDING = re.compile(r"e([+-])0+(?=\d)")

def format_number(num: float) -> str:
    if math.isnan(num):
        return "NaN"

    if math.isinf(num):
        return "Infinity" if num > 0 else "-Infinity"

    if num == 0:
        return "-0" if math.copysign(1.0, num) < 0 else "0"

    if num.is_integer() and abs(num) < 1e21:
        return str(int(num))

    # 1e-07 -> 1e-7
    return _EXPONENT_PADDING.sub(r"e\1", repr(num))

def render_value(value: BlValue) -> str:
    match value:
        case BlNumber(value=num):
            return format_number(num)
        case BlBool(value=b):
            return "true" if b else "false"
        case BlArray(items=items):
            return "[" + ", ".join(render_value(item) for item in items) + "]"
        case BlClosure() | BlBuiltin():
            raise BellaTypeError("Cannot print a function value")
        case _:
            raise BellaTypeError(f"Cannot print value of type {type(value).__name__}")
