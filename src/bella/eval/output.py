from __future__ import annotations

from typing import List

from ..runtime import RunOptions
from ..tree import Node
from ..types import BellaRuntimeError, Frame
from ..utils import render_value
from .common import EvalFunc

def eval_print(children: List[Node], frame: Frame, eval_func: EvalFunc) -> None:
    if len(children) != 1:
        raise BellaRuntimeError("Malformed print statement")

    value = eval_func(children[0], frame)
    write = (frame.options or RunOptions()).write
    write(render_value(value))
