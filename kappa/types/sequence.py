"""Immutable sequence and map helpers.

Lists and vectors are tuple subclasses, so they cannot be mutated once built;
"changing" one always makes a new value. Maps are plain dicts keyed by str or
Keyword and are treated as immutable by every builtin.
"""

from __future__ import annotations

from typing import Iterable

from kappa import LispValue
from kappa.errors import KappaTypeError
from kappa.types.symbol import Keyword


class List(tuple):
    """Parenthesised sequence; also the executable form for the evaluator."""

    __slots__ = ()

    def __repr__(self):
        return f"List({', '.join(repr(x) for x in self)})"


class Vector(tuple):
    """Bracketed sequence; elements are evaluated but a vector is never invoked."""

    __slots__ = ()

    def __repr__(self):
        return f"Vector({', '.join(repr(x) for x in self)})"


def is_sequential(x: LispValue) -> bool:
    return isinstance(x, (List, Vector))


def check_map_key(key: LispValue) -> LispValue:
    """Map keys are restricted to strings and keywords."""
    if isinstance(key, Keyword) or type(key) is str:
        return key
    raise KappaTypeError(f"Map keys must be strings or keywords, got {type(key).__name__}")


def make_map(kvs: Iterable[LispValue], base: dict | None = None) -> dict:
    """Build a new map from a flat key/value sequence, on top of `base`.

    `base` is copied, never modified.
    """
    items = list(kvs)
    if len(items) % 2 != 0:
        raise KappaTypeError("Map requires an even number of key/value forms")
    result = dict(base) if base is not None else {}
    for key, value in zip(items[::2], items[1::2]):
        result[check_map_key(key)] = value
    return result
