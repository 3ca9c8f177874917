from __future__ import annotations

import logging
from typing import List

from ..tree import Node
from ..types import BellaRuntimeError, Frame
from .common import EvalFunc, expect_ident_token

logger = logging.getLogger(__name__)

def eval_var_decl(children: List[Node], frame: Frame, eval_func: EvalFunc) -> None:
    if len(children) != 2:
        raise BellaRuntimeError("Malformed variable declaration")

    name = expect_ident_token(children[0], "Declared name")
    value = eval_func(children[1], frame)
    frame.declare(name, value)
    logger.debug("declared %s", name)

def eval_assign(children: List[Node], frame: Frame, eval_func: EvalFunc) -> None:
    if len(children) != 2:
        raise BellaRuntimeError("Malformed assignment")

    name = expect_ident_token(children[0], "Assignment target")
    value = eval_func(children[1], frame)
    frame.assign(name, value)
