from __future__ import annotations

import argparse
import sys
from typing import Dict, List, Optional

from lark import Tree

from . import nodes as n
from .evaluator import interpret
from .logging_config import setup_logging
from .runtime import RunOptions
from .types import BellaRuntimeError, Frame

SAMPLES: Dict[str, Tree] = {
    "hello": n.program(n.block([
        n.printstmt(n.numeral(0x07734)),
    ])),
    "sample": n.program(n.block([
        n.printstmt(n.unary("-", n.numeral(5))),
        n.printstmt(n.binary(n.numeral(5), "*", n.numeral(8))),
    ])),
    "countdown": n.program(n.block([
        n.vardecl("x", n.numeral(10)),
        n.whilestmt(n.binary(n.ident("x"), ">", n.numeral(1)), n.block([
            n.printstmt(n.ident("x")),
            n.assign("x", n.binary(n.ident("x"), "-", n.numeral(1))),
        ])),
        n.printstmt(n.boolean(True)),
    ])),
}

def run(program: Tree, scoping: str="lexical", prelude: bool=False, frame: Optional[Frame]=None) -> List[str]:
    """Interpret a program and return its printed lines in order."""
    lines: List[str] = []
    options = RunOptions(write=lines.append, scoping=scoping, prelude=prelude)
    interpret(program, frame=frame, options=options)
    return lines

def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bella-run", description="Run a bundled Bella sample program.")
    parser.add_argument("sample", nargs="?", default="hello", help="sample name (default: hello)")
    parser.add_argument("--flat", action="store_true", help="bind call parameters in the single global scope")
    parser.add_argument("--prelude", action="store_true", help="install the math builtins")
    parser.add_argument("--debug", action="store_true", help="log evaluator activity to stderr")
    parser.add_argument("--list", action="store_true", help="list sample names and exit")
    return parser

def main(argv: Optional[List[str]]=None) -> int:
    args = _build_arg_parser().parse_args(argv)

    if args.list:
        for name in SAMPLES:
            print(name)
        return 0

    if args.debug:
        setup_logging("DEBUG")

    program = SAMPLES.get(args.sample)
    if program is None:
        print(f"Unknown sample: {args.sample}", file=sys.stderr)
        return 2

    options = RunOptions(scoping="flat" if args.flat else "lexical", prelude=args.prelude)

    try:
        interpret(program, options=options)
    except BellaRuntimeError as exc:
        print(f"{exc.kind}: {exc}", file=sys.stderr)
        return 1

    return 0

if __name__ == "__main__":
    sys.exit(main())
