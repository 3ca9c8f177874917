from __future__ import annotations

import math
from typing import Any, Callable

from ..tree import Node, is_token, token_kind
from ..types import BlBool, BlNumber, BlValue, BellaRuntimeError, BellaTypeError, Frame, kind_name

EvalFunc = Callable[[Node, Frame], BlValue]

def expect_ident_token(node: Any, context: str) -> str:
    if is_token(node) and token_kind(node) == 'IDENT':
        return str(node.value)

    raise BellaRuntimeError(f"{context} must be an identifier")

def token_number(node: Any) -> BlNumber:
    try:
        return BlNumber(float(node.value))
    except ValueError:
        raise BellaRuntimeError(f"Malformed numeral {node.value!r}") from None

def require_number(value: BlValue, context: str) -> float:
    if isinstance(value, BlNumber):
        return value.value

    raise BellaTypeError(f"{context} expects a number; got {kind_name(value)}")

def require_bool(value: BlValue, context: str) -> bool:
    if isinstance(value, BlBool):
        return value.value

    raise BellaTypeError(f"{context} expects a boolean; got {kind_name(value)}")

def require_index(value: BlValue) -> int:
    """Subscript indices must be integral numbers; fractions are rejected, not truncated."""
    num = require_number(value, "Subscript")

    if not math.isfinite(num) or not num.is_integer():
        raise BellaTypeError(f"Subscript must be an integer; got {num!r}")

    return int(num)
