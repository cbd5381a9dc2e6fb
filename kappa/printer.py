"""Value -> text.

`pr_str(value, readable=True)` renders any Kappa value. In readable mode
strings are quoted and escaped so the reader gives back an equal value; in
display mode (`readable=False`) strings are written raw.
"""

from __future__ import annotations

from kappa import LispValue
from kappa.errors import KappaTypeError
from kappa.types import (
    Atom, Closure, Keyword, List, NativeFunction, NilType, Symbol, Vector,
)

_ESCAPES = str.maketrans({"\\": "\\\\", '"': '\\"', "\n": "\\n"})


def escape_string(s: str) -> str:
    return '"' + s.translate(_ESCAPES) + '"'


def pr_str(obj: LispValue, readable: bool = True) -> str:
    match obj:
        case NilType():
            return "nil"
        case bool():
            return "true" if obj else "false"
        case int():
            return str(obj)
        case str():
            return escape_string(obj) if readable else obj
        case Symbol() | Keyword():
            return str(obj)
        case List():
            return "(" + join_printed(obj, readable) + ")"
        case Vector():
            return "[" + join_printed(obj, readable) + "]"
        case dict():
            items = (f"{pr_str(k, readable)} {pr_str(v, readable)}" for k, v in obj.items())
            return "{" + " ".join(items) + "}"
        case Atom():
            return f"(atom {pr_str(obj.value, readable)})"
        case NativeFunction():
            return f"#<native {obj.name}>"
        case Closure():
            return "#<function>"
    raise KappaTypeError(f"Cannot print value of type {type(obj).__name__}")


def join_printed(items, readable: bool, sep: str = " ") -> str:
    """Print each value and join with `sep` (used by str, pr-str, prn, println)."""
    return sep.join(pr_str(x, readable) for x in items)
