"""Shared helpers for working with the lark Tree/Token nodes of a program."""
from __future__ import annotations

from typing import Any, List, Optional

from lark import Token, Tree
from typing_extensions import TypeAlias, TypeGuard

Node: TypeAlias = Tree | Token


def is_tree(node: Any) -> TypeGuard[Tree]:
    return isinstance(node, Tree)

def is_token(node: Any) -> TypeGuard[Token]:
    return isinstance(node, Token)

def tree_label(node: Any) -> Optional[str]:
    return node.data if is_tree(node) else None

def tree_children(node: Any) -> List[Node]:
    if not is_tree(node):
        return []

    children = getattr(node, "children", None)
    if children is None:
        return []

    return list(children)

def token_kind(node: Any) -> Optional[str]:
    if not is_token(node):
        return None

    return str(node.type)

def node_meta(node: Any) -> Optional[Any]:
    return getattr(node, "meta", None)

def node_position(node: Any) -> tuple[Optional[int], Optional[int]]:
    """Line/column of a node when the front end propagated positions."""
    if is_token(node):
        return getattr(node, "line", None), getattr(node, "column", None)

    meta = node_meta(node)
    if meta is None or getattr(meta, "empty", True):
        return None, None

    return getattr(meta, "line", None), getattr(meta, "column", None)
