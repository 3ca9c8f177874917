"""Builders for Bella program trees.

A front end hands the evaluator lark ``Tree``/``Token`` nodes; these helpers
build the same shapes directly, one function per construct:

    program(block([
        vardecl("x", numeral(10)),
        whilestmt(binary(ident("x"), ">", numeral(1)), block([
            printstmt(ident("x")),
            assign("x", binary(ident("x"), "-", numeral(1))),
        ])),
    ]))

Binary operands are always given as ``(left, op, right)``.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from lark import Token, Tree

from .tree import Node


def _ident_token(name: str | Token) -> Token:
    if isinstance(name, Token):
        if name.type != 'IDENT':
            raise TypeError(f"expected an IDENT token, got {name.type}")
        return name

    if not isinstance(name, str) or not name:
        raise TypeError(f"identifier name must be a non-empty string, got {name!r}")

    return Token('IDENT', name)

# ---------------- Statements ----------------

def program(body: Tree) -> Tree:
    return Tree('program', [body])

def block(statements: Iterable[Tree]) -> Tree:
    return Tree('block', list(statements))

def vardecl(name: str | Token, init: Node) -> Tree:
    return Tree('vardecl', [_ident_token(name), init])

def fundecl(name: str | Token, params: Sequence[str | Token], body: Node) -> Tree:
    paramlist = Tree('paramlist', [_ident_token(p) for p in params])
    return Tree('fundecl', [_ident_token(name), paramlist, body])

def assign(name: str | Token, value: Node) -> Tree:
    return Tree('assign', [_ident_token(name), value])

def printstmt(value: Node) -> Tree:
    return Tree('printstmt', [value])

def whilestmt(test: Node, body: Tree) -> Tree:
    return Tree('whilestmt', [test, body])

# ---------------- Expressions ----------------

def numeral(value: float) -> Token:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"numeral expects a number, got {value!r}")

    return Token('NUMBER', repr(float(value)))

def boolean(value: bool) -> Token:
    return Token('TRUE', 'true') if value else Token('FALSE', 'false')

def ident(name: str) -> Token:
    return _ident_token(name)

def unary(op: str, operand: Node) -> Tree:
    return Tree('unary', [Token('OP', op), operand])

def binary(left: Node, op: str, right: Node) -> Tree:
    return Tree('binary', [left, Token('OP', op), right])

def conditional(test: Node, consequent: Node, alternate: Node) -> Tree:
    return Tree('conditional', [test, consequent, alternate])

def array(elements: Iterable[Node]) -> Tree:
    return Tree('array', list(elements))

def subscript(target: Node, index: Node) -> Tree:
    return Tree('subscript', [target, index])

def call(name: str | Token, args: Iterable[Node]) -> Tree:
    return Tree('call', [_ident_token(name), Tree('args', list(args))])
