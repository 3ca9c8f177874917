from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Sequence, Tuple

from typing_extensions import TypeAlias

from .tree import Node

if TYPE_CHECKING:
    from .runtime import RunOptions

# ---------- Value Model ----------

@dataclass
class BlNumber:
    value: float

@dataclass
class BlBool:
    value: bool

@dataclass
class BlArray:
    items: List['BlValue']

@dataclass(frozen=True, eq=False)
class BlClosure:
    params: Tuple[str, ...]
    body: Node                     # single body expression
    frame: Optional['Frame'] = None  # defining frame, parent of each call frame
    def __repr__(self) -> str:
        body_label = getattr(self.body, 'data', type(self.body).__name__)
        param_desc = ", ".join(self.params) if self.params else "nullary"
        return f"<closure params={param_desc} body={body_label}>"

BuiltinFn = Callable[[List[float]], 'BlValue']

@dataclass(frozen=True, eq=False)
class BlBuiltin:
    name: str
    fn: BuiltinFn
    arity: Optional[int] = None
    def __repr__(self) -> str:
        return f"<builtin {self.name}>"

BlValue: TypeAlias = BlNumber | BlBool | BlArray | BlClosure | BlBuiltin

def kind_name(value: object) -> str:
    match value:
        case BlNumber():
            return "number"
        case BlBool():
            return "boolean"
        case BlArray():
            return "array"
        case BlClosure() | BlBuiltin():
            return "function"
        case _:
            return type(value).__name__

# ---------- Environment ----------

class Frame:
    """One scope of name bindings; lookups and assignments walk to the parent."""

    def __init__(self, parent: Optional['Frame']=None, label: str="global", options: Optional['RunOptions']=None):
        self.parent = parent
        self.label = label
        self.vars: Dict[str, BlValue] = {}

        if options is None and parent is not None:
            options = parent.options
        self.options = options

    def has(self, name: str) -> bool:
        return name in self.vars

    def declare(self, name: str, val: BlValue) -> None:
        if name in self.vars:
            raise BellaDuplicateBindingError(name)

        self.vars[name] = val

    def declare_function(self, name: str, params: Sequence[str], body: Node) -> BlClosure:
        if name in self.vars:
            raise BellaDuplicateBindingError(name, what="Function")

        closure = BlClosure(params=tuple(params), body=body, frame=self)
        self.vars[name] = closure
        return closure

    def lookup(self, name: str) -> BlValue:
        frame: Optional[Frame] = self

        while frame is not None:
            if name in frame.vars:
                return frame.vars[name]
            frame = frame.parent

        raise BellaUnboundNameError(name)

    def assign(self, name: str, val: BlValue) -> None:
        frame: Optional[Frame] = self

        while frame is not None:
            if name in frame.vars:
                frame.vars[name] = val
                return
            frame = frame.parent

        raise BellaUnboundNameError(name)

    def root(self) -> 'Frame':
        frame = self
        while frame.parent is not None:
            frame = frame.parent
        return frame

    def __repr__(self) -> str:
        return f"<Frame {self.label} names={sorted(self.vars)}>"

# ---------- Exceptions ----------

class BellaRuntimeError(Exception):
    kind: str = "RuntimeError"
    bl_meta: Optional[Tuple[Optional[int], Optional[int]]]

    def __init__(self, message: str):
        super().__init__(message)
        self.bl_meta = None

    def __str__(self) -> str:  # pragma: no cover - trivial formatting
        msg = super().__str__()

        if self.bl_meta is None:
            return msg

        line, col = self.bl_meta
        if line is None:
            return msg

        if col is None:
            return f"{msg} (line {line})"

        return f"{msg} (line {line}, col {col})"

class BellaDuplicateBindingError(BellaRuntimeError):
    kind = "DuplicateBinding"

    def __init__(self, name: str, what: str = "Variable"):
        super().__init__(f"{what} '{name}' already declared")
        self.name = name

class BellaUnboundNameError(BellaRuntimeError):
    kind = "UnboundName"

    def __init__(self, name: str):
        super().__init__(f"Name '{name}' not declared")
        self.name = name

class BellaTypeError(BellaRuntimeError):
    kind = "TypeMismatch"

class BellaArityError(BellaRuntimeError):
    kind = "ArityMismatch"

    def __init__(self, name: str, expected: int, got: int):
        self.expected = expected
        self.got = got
        self.too_few = got < expected
        detail = "too few" if self.too_few else "too many"
        super().__init__(f"Function '{name}' expects {expected} argument(s); got {got} ({detail})")

class BellaIndexError(BellaRuntimeError):
    kind = "IndexOutOfRange"

    def __init__(self, index: int, length: int):
        super().__init__(f"Index {index} out of range for array of length {length}")
        self.index = index
        self.length = length

class BellaUnknownOperatorError(BellaRuntimeError):
    kind = "UnknownOperator"

    def __init__(self, operator: str, arity: str = "binary"):
        super().__init__(f"Unknown {arity} operator: {operator}")
        self.operator = operator

class BellaStackOverflowError(BellaRuntimeError):
    kind = "StackOverflow"

    def __init__(self, limit: int):
        super().__init__(f"Call nesting too deep (host recursion limit {limit} reached)")
        self.limit = limit
