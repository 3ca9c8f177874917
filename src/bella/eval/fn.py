from __future__ import annotations

import logging
from typing import Any, List

from ..tree import Node, tree_children, tree_label
from ..types import BellaRuntimeError, Frame
from .common import expect_ident_token

logger = logging.getLogger(__name__)

def extract_param_names(params_node: Any) -> List[str]:
    if params_node is None:
        return []

    if tree_label(params_node) != 'paramlist':
        raise BellaRuntimeError(f"Malformed parameter list: {params_node!r}")

    return [expect_ident_token(p, "Parameter") for p in tree_children(params_node)]

def eval_fun_decl(children: List[Node], frame: Frame) -> None:
    """Bind a closure under the function name; the body runs only when called."""
    if len(children) != 3:
        raise BellaRuntimeError("Malformed function declaration")

    name_node, params_node, body_node = children
    name = expect_ident_token(name_node, "Function name")
    params = extract_param_names(params_node)

    frame.declare_function(name, params, body_node)
    logger.debug("declared function %s/%d", name, len(params))
