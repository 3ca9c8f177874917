from __future__ import annotations

import math
from typing import List

from lark import Token

from ..tree import Node
from ..types import BlArray, BlBool, BlNumber, BlValue, BellaTypeError, BellaUnknownOperatorError, Frame, kind_name
from ..utils import bl_equals, same_kind
from .common import EvalFunc, require_bool, require_number

ARITHMETIC_OPS = frozenset({'+', '-', '*', '/', '%', '**'})
COMPARISON_OPS = frozenset({'<', '>', '<=', '>='})
EQUALITY_OPS = frozenset({'==', '!='})
LOGICAL_OPS = frozenset({'&&', '||'})
BINARY_OPS = ARITHMETIC_OPS | COMPARISON_OPS | EQUALITY_OPS | LOGICAL_OPS
UNARY_OPS = frozenset({'-', '!'})

def as_op(x: Node | str) -> str:
    if isinstance(x, Token):
        return str(x.value)

    return str(x)

def eval_unary(op_node: Node, rhs_node: Node, frame: Frame, eval_func: EvalFunc) -> BlValue:
    op = as_op(op_node)

    if op not in UNARY_OPS:
        raise BellaUnknownOperatorError(op, arity="unary")

    rhs = eval_func(rhs_node, frame)

    match op:
        case '-':
            return BlNumber(-require_number(rhs, "Unary '-'"))
        case _:
            return BlBool(not require_bool(rhs, "Unary '!'"))

def eval_binary(children: List[Node], frame: Frame, eval_func: EvalFunc) -> BlValue:
    lhs_node, op_node, rhs_node = children
    op = as_op(op_node)

    if op not in BINARY_OPS:
        raise BellaUnknownOperatorError(op)

    if op in LOGICAL_OPS:
        return eval_logical(op, lhs_node, rhs_node, frame, eval_func)

    lhs = eval_func(lhs_node, frame)
    rhs = eval_func(rhs_node, frame)

    if op in EQUALITY_OPS:
        if not same_kind(lhs, rhs):
            raise BellaTypeError(
                f"Operator '{op}' cannot compare {kind_name(lhs)} with {kind_name(rhs)}"
            )
        equal = bl_equals(lhs, rhs)
        return BlBool(equal if op == '==' else not equal)

    a = require_number(lhs, f"Operator '{op}'")
    b = require_number(rhs, f"Operator '{op}'")

    if op in COMPARISON_OPS:
        return BlBool(_compare_numbers(op, a, b))

    return BlNumber(apply_arithmetic(op, a, b))

def eval_logical(op: str, lhs_node: Node, rhs_node: Node, frame: Frame, eval_func: EvalFunc) -> BlValue:
    lhs = require_bool(eval_func(lhs_node, frame), f"Operator '{op}'")

    # right operand is skipped once the left side decides the result
    if op == '&&' and not lhs:
        return BlBool(False)
    if op == '||' and lhs:
        return BlBool(True)

    return BlBool(require_bool(eval_func(rhs_node, frame), f"Operator '{op}'"))

def eval_conditional(children: List[Node], frame: Frame, eval_func: EvalFunc) -> BlValue:
    test_node, consequent, alternate = children
    test = require_bool(eval_func(test_node, frame), "Conditional test")

    return eval_func(consequent if test else alternate, frame)

def eval_array(children: List[Node], frame: Frame, eval_func: EvalFunc) -> BlValue:
    return BlArray([eval_func(child, frame) for child in children])

def _compare_numbers(op: str, a: float, b: float) -> bool:
    match op:
        case '<':
            return a < b
        case '>':
            return a > b
        case '<=':
            return a <= b
        case _:
            return a >= b

def apply_arithmetic(op: str, a: float, b: float) -> float:
    """Number arithmetic with IEEE-754 results where Python would raise."""
    match op:
        case '+':
            return a + b
        case '-':
            return a - b
        case '*':
            return a * b
        case '/':
            if b == 0:
                if a == 0 or math.isnan(a):
                    return math.nan
                return math.copysign(math.inf, a) * math.copysign(1.0, b)
            return a / b
        case '%':
            try:
                return math.fmod(a, b)
            except ValueError:
                return math.nan
        case '**':
            return _ieee_pow(a, b)
    raise BellaUnknownOperatorError(op)

def _odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and int(x) % 2 == 1

def _ieee_pow(a: float, b: float) -> float:
    if a == 0 and b < 0:
        return math.copysign(math.inf, a) if _odd_integer(b) else math.inf

    try:
        return math.pow(a, b)
    except OverflowError:
        return -math.inf if a < 0 and _odd_integer(b) else math.inf
    except ValueError:
        return math.nan
