from __future__ import annotations

from typing import List

from ..runtime import call_value
from ..tree import Node, tree_children, tree_label
from ..types import BlArray, BlBuiltin, BlClosure, BlValue, BellaIndexError, BellaRuntimeError, BellaTypeError, Frame, kind_name
from .common import EvalFunc, expect_ident_token, require_index

def eval_subscript(children: List[Node], frame: Frame, eval_func: EvalFunc) -> BlValue:
    array_node, index_node = children
    target = eval_func(array_node, frame)
    index_val = eval_func(index_node, frame)

    if not isinstance(target, BlArray):
        raise BellaTypeError(f"Subscripted expression must be an array; got {kind_name(target)}")

    index = require_index(index_val)
    items = target.items

    if index < 0 or index >= len(items):
        raise BellaIndexError(index, len(items))

    return items[index]

def eval_args_node(args_node: Node | None, frame: Frame, eval_func: EvalFunc) -> List[BlValue]:
    if args_node is None:
        return []

    if tree_label(args_node) != 'args':
        raise BellaRuntimeError(f"Malformed argument list: {args_node!r}")

    return [eval_func(arg, frame) for arg in tree_children(args_node)]

def eval_call(children: List[Node], frame: Frame, eval_func: EvalFunc) -> BlValue:
    if not children:
        raise BellaRuntimeError("Malformed call expression")

    name = expect_ident_token(children[0], "Callee")
    callee = frame.lookup(name)

    if not isinstance(callee, (BlClosure, BlBuiltin)):
        raise BellaTypeError(f"'{name}' is not callable (got {kind_name(callee)})")

    args = eval_args_node(children[1] if len(children) > 1 else None, frame, eval_func)

    return call_value(name, callee, args, frame)
