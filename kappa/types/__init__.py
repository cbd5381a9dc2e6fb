"""Kappa's value model.

The closed set of runtime values:

    nil        Nil                  boolean    True / False
    integer    int                  string     str
    symbol     Symbol               keyword    Keyword
    list       List                 vector     Vector
    map        dict (str | Keyword keys)
    atom       Atom                 function   NativeFunction | Closure
"""

from kappa import LispValue
from kappa.types.nil import Nil, NilType
from kappa.types.symbol import Symbol, Keyword
from kappa.types.sequence import List, Vector, is_sequential, make_map, check_map_key
from kappa.types.atom import Atom
from kappa.types.environment import Environment
from kappa.types.function import Function, NativeFunction, Closure
from kappa.types.equality import is_equal


def is_truthy(value: LispValue) -> bool:
    """Everything except nil and false is true (0 and "" included)."""
    return not (value is Nil or value is False)


__all__ = [
    "Nil", "NilType", "Symbol", "Keyword", "List", "Vector", "is_sequential",
    "make_map", "check_map_key", "Atom", "Environment", "Function",
    "NativeFunction", "Closure", "is_equal", "is_truthy",
]
