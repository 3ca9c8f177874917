"""Tree-walking evaluator for the Bella language."""

from .evaluator import eval_node, exec_stmt, interpret
from .runner import run
from .runtime import RunOptions
from .types import (
    BellaArityError,
    BellaDuplicateBindingError,
    BellaIndexError,
    BellaRuntimeError,
    BellaStackOverflowError,
    BellaTypeError,
    BellaUnboundNameError,
    BellaUnknownOperatorError,
    Frame,
)

__all__ = [
    "interpret",
    "eval_node",
    "exec_stmt",
    "run",
    "RunOptions",
    "Frame",
    "BellaRuntimeError",
    "BellaStackOverflowError",
    "BellaDuplicateBindingError",
    "BellaUnboundNameError",
    "BellaTypeError",
    "BellaArityError",
    "BellaIndexError",
    "BellaUnknownOperatorError",
]
