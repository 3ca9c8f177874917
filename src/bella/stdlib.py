"""Math prelude (sqrt, sin, cos, exp, ln, hypot, π) registered via bella.runtime."""

from __future__ import annotations

import math
from typing import List

from .runtime import register_constant, register_stdlib
from .types import BlNumber

@register_stdlib("sqrt", arity=1)
def std_sqrt(args: List[float]) -> BlNumber:
    (x,) = args
    return BlNumber(math.sqrt(x) if x >= 0 else math.nan)

@register_stdlib("sin", arity=1)
def std_sin(args: List[float]) -> BlNumber:
    (x,) = args
    return BlNumber(math.sin(x) if math.isfinite(x) else math.nan)

@register_stdlib("cos", arity=1)
def std_cos(args: List[float]) -> BlNumber:
    (x,) = args
    return BlNumber(math.cos(x) if math.isfinite(x) else math.nan)

@register_stdlib("exp", arity=1)
def std_exp(args: List[float]) -> BlNumber:
    (x,) = args
    try:
        return BlNumber(math.exp(x))
    except OverflowError:
        return BlNumber(math.inf)

@register_stdlib("ln", arity=1)
def std_ln(args: List[float]) -> BlNumber:
    (x,) = args
    if x == 0:
        return BlNumber(-math.inf)
    if x < 0 or math.isnan(x):
        return BlNumber(math.nan)
    return BlNumber(math.log(x))

@register_stdlib("hypot", arity=2)
def std_hypot(args: List[float]) -> BlNumber:
    x, y = args
    return BlNumber(math.hypot(x, y))

register_constant("π", BlNumber(math.pi))
