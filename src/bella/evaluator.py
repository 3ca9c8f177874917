from __future__ import annotations

import logging
import sys
from typing import Callable, Optional

from lark import Token, Tree

from .runtime import RunOptions, make_global_frame
from .tree import Node, is_token, is_tree, node_position, tree_label
from .types import BlBool, BlValue, BellaRuntimeError, BellaStackOverflowError, Frame

from .eval.blocks import eval_block, eval_program
from .eval.chains import eval_call, eval_subscript
from .eval.common import token_number
from .eval.expr import eval_array, eval_binary, eval_conditional, eval_unary
from .eval.fn import eval_fun_decl
from .eval.let import eval_assign, eval_var_decl
from .eval.loops import eval_while_stmt
from .eval.output import eval_print

logger = logging.getLogger(__name__)

# each nested Bella call costs about fourteen host frames
RECURSION_LIMIT = 10000

def _maybe_attach_location(exc: BellaRuntimeError, node: Node) -> None:
    # innermost node with a position wins
    if exc.bl_meta is not None:
        return

    line, column = node_position(node)
    if line is None:
        return

    exc.bl_meta = (line, column)

# ---------------- Public API ----------------

def interpret(program: Node, frame: Optional[Frame]=None, options: Optional[RunOptions]=None) -> None:
    """Evaluate a whole program tree.

    A fresh global frame is created unless one is passed in; reusing a frame
    across calls keeps every binding from earlier runs.
    """
    if frame is None:
        frame = make_global_frame(options)
    elif options is not None:
        frame.options = options

    if tree_label(program) != 'program':
        raise BellaRuntimeError(f"Expected a program, got {tree_label(program) or program!r}")

    logger.debug("interpreting program with %s scoping", (frame.options or RunOptions()).scoping)
    previous_limit = sys.getrecursionlimit()
    limit = max(previous_limit, RECURSION_LIMIT)
    sys.setrecursionlimit(limit)

    try:
        exec_stmt(program, frame)
    except RecursionError:
        raise BellaStackOverflowError(limit) from None
    finally:
        sys.setrecursionlimit(previous_limit)

# ---------------- Statements ----------------

def exec_stmt(n: Node, frame: Frame) -> None:
    try:
        _exec_stmt_inner(n, frame)
    except BellaRuntimeError as e:
        _maybe_attach_location(e, n)
        raise

def _exec_stmt_inner(n: Node, frame: Frame) -> None:
    if not is_tree(n):
        raise BellaRuntimeError(f"Expected a statement, got {n!r}")

    match n.data:
        case 'program':
            eval_program(n.children, frame, exec_stmt)
        case 'block':
            eval_block(n, frame, exec_stmt)
        case 'vardecl':
            eval_var_decl(n.children, frame, eval_node)
        case 'fundecl':
            eval_fun_decl(n.children, frame)
        case 'assign':
            eval_assign(n.children, frame, eval_node)
        case 'printstmt':
            eval_print(n.children, frame, eval_node)
        case 'whilestmt':
            eval_while_stmt(n.children, frame, eval_node, exec_stmt)
        case d:
            raise BellaRuntimeError(f"Unknown statement: {d}")

# ---------------- Expressions ----------------

def eval_node(n: Node, frame: Frame) -> BlValue:
    try:
        return _eval_node_inner(n, frame)
    except BellaRuntimeError as e:
        _maybe_attach_location(e, n)
        raise

def _eval_node_inner(n: Node, frame: Frame) -> BlValue:
    if is_token(n):
        return _eval_token(n, frame)

    if not is_tree(n):
        raise BellaRuntimeError(f"Expected an expression, got {n!r}")

    handler = _NODE_DISPATCH.get(n.data)
    if handler is None:
        raise BellaRuntimeError(f"Unknown expression: {n.data}")

    return handler(n, frame)

def _eval_token(t: Token, frame: Frame) -> BlValue:
    handler = _TOKEN_DISPATCH.get(t.type)
    if handler is None:
        raise BellaRuntimeError(f"Unhandled token {t.type}:{t.value}")

    return handler(t, frame)

_NODE_DISPATCH: dict[str, Callable[[Tree, Frame], BlValue]] = {
    'unary': lambda n, frame: eval_unary(n.children[0], n.children[1], frame, eval_node),
    'binary': lambda n, frame: eval_binary(n.children, frame, eval_node),
    'conditional': lambda n, frame: eval_conditional(n.children, frame, eval_node),
    'array': lambda n, frame: eval_array(n.children, frame, eval_node),
    'subscript': lambda n, frame: eval_subscript(n.children, frame, eval_node),
    'call': lambda n, frame: eval_call(n.children, frame, eval_node),
}

_TOKEN_DISPATCH: dict[str, Callable[[Token, Frame], BlValue]] = {
    'NUMBER': lambda t, _: token_number(t),
    'TRUE': lambda _, __: BlBool(True),
    'FALSE': lambda _, __: BlBool(False),
    'IDENT': lambda t, frame: frame.lookup(str(t.value)),
}
