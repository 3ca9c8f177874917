from __future__ import annotations

from typing import Callable, List

from ..tree import Node, tree_children, tree_label
from ..types import BellaRuntimeError, Frame

ExecFunc = Callable[[Node, Frame], None]

def eval_block(node: Node, frame: Frame, exec_func: ExecFunc) -> None:
    """Run a stmt list in source order; errors propagate untouched."""
    if tree_label(node) != 'block':
        raise BellaRuntimeError(f"Expected a block, got {tree_label(node) or node!r}")

    for stmt in tree_children(node):
        exec_func(stmt, frame)

def eval_program(children: List[Node], frame: Frame, exec_func: ExecFunc) -> None:
    if len(children) != 1:
        raise BellaRuntimeError("Program must contain exactly one block")

    eval_block(children[0], frame, exec_func)
