from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from .types import (
    BlBuiltin, BlClosure, BlNumber, BlValue, BuiltinFn, Frame,
    BellaArityError, BellaTypeError, kind_name,
)

logger = logging.getLogger(__name__)

SCOPING_MODES = ("lexical", "flat")

@dataclass
class RunOptions:
    """Knobs for one evaluation.

    - write: sink receiving one rendered line per executed print statement.
    - scoping: "lexical" gives each call a child frame holding its parameters;
      "flat" declares parameters into the single global frame, so they collide
      with existing names and stay bound after the call.
    - prelude: install the math builtins into a parent frame of the globals.
    """
    write: Callable[[str], None] = print
    scoping: str = "lexical"
    prelude: bool = False

    def __post_init__(self) -> None:
        if self.scoping not in SCOPING_MODES:
            raise ValueError(f"scoping must be one of {SCOPING_MODES}; got {self.scoping!r}")

# ---------- Stdlib registry ----------

class Builtins:
    stdlib_functions: Dict[str, BlBuiltin] = {}
    stdlib_constants: Dict[str, BlValue] = {}

_STDLIB_INITIALIZED = False

def init_stdlib() -> None:
    """Load stdlib modules (idempotent) so register_stdlib hooks run."""
    global _STDLIB_INITIALIZED

    if _STDLIB_INITIALIZED:
        return

    importlib.import_module("bella.stdlib")
    _STDLIB_INITIALIZED = True

def register_stdlib(name: str, *, arity: Optional[int] = None):
    def dec(fn: BuiltinFn):
        Builtins.stdlib_functions[name] = BlBuiltin(name=name, fn=fn, arity=arity)
        return fn

    return dec

def register_constant(name: str, value: BlValue) -> None:
    Builtins.stdlib_constants[name] = value

def make_global_frame(options: Optional[RunOptions] = None) -> Frame:
    """Fresh global environment, optionally parented by the prelude frame."""
    options = options or RunOptions()
    parent: Optional[Frame] = None

    if options.prelude:
        init_stdlib()
        parent = Frame(label="prelude", options=options)

        for name, builtin in Builtins.stdlib_functions.items():
            parent.declare(name, builtin)
        for name, const in Builtins.stdlib_constants.items():
            parent.declare(name, const)

    return Frame(parent=parent, label="global", options=options)

# ---------- Calls ----------

def call_value(name: str, callee: BlValue, args: List[BlValue], caller_frame: Frame) -> BlValue:
    match callee:
        case BlClosure():
            return call_closure(name, callee, args, caller_frame)
        case BlBuiltin():
            return call_builtin(callee, args)
        case _:
            raise BellaTypeError(f"'{name}' is not callable (got {kind_name(callee)})")

def call_closure(name: str, fn: BlClosure, args: List[BlValue], caller_frame: Frame) -> BlValue:
    from .evaluator import eval_node  # local import to avoid cycle

    if len(args) != len(fn.params):
        raise BellaArityError(name, len(fn.params), len(args))

    defining = fn.frame if fn.frame is not None else caller_frame.root()
    options = caller_frame.options or RunOptions()

    if options.scoping == "flat":
        callee_frame = defining
    else:
        callee_frame = Frame(parent=defining, label=f"call {name}")

    for param, val in zip(fn.params, args):
        callee_frame.declare(param, val)

    logger.debug("call %s(%s) in %s frame", name, ", ".join(fn.params), options.scoping)

    return eval_node(fn.body, callee_frame)

def call_builtin(fn: BlBuiltin, args: List[BlValue]) -> BlValue:
    if fn.arity is not None and len(args) != fn.arity:
        raise BellaArityError(fn.name, fn.arity, len(args))

    nums: List[float] = []

    for arg in args:
        if not isinstance(arg, BlNumber):
            raise BellaTypeError(f"{fn.name} expects number arguments; got {kind_name(arg)}")
        nums.append(arg.value)

    return fn.fn(nums)
