from __future__ import annotations

import logging
from typing import Callable, List

from ..tree import Node
from ..types import BellaRuntimeError, Frame
from .common import EvalFunc, require_bool

logger = logging.getLogger(__name__)

ExecFunc = Callable[[Node, Frame], None]

def eval_while_stmt(children: List[Node], frame: Frame, eval_func: EvalFunc, exec_block: ExecFunc) -> None:
    """Re-test before every pass; there is no iteration bound."""
    if len(children) != 2:
        raise BellaRuntimeError("Malformed while statement")

    test_node, body_node = children
    iterations = 0

    while require_bool(eval_func(test_node, frame), "While test"):
        exec_block(body_node, frame)
        iterations += 1

    logger.debug("while loop finished after %d iteration(s)", iterations)
