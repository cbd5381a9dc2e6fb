"""Built-in functions for the Kappa runtime environment.

This module defines core arithmetic, comparison, sequence and map processing,
predicates, conversions, text I/O and atom operations exposed to Lisp code.
Each builtin takes the evaluated arguments positionally and checks the kinds
it needs; a mismatch raises KappaTypeError.
"""
from __future__ import annotations

from functools import wraps
from pathlib import Path
from typing import Callable

from kappa import LispValue
from kappa.errors import (
    KappaArityError,
    KappaIndexError,
    KappaIOError,
    KappaTypeError,
    KappaZeroDivisionError,
    ThrowException,
)
from kappa.printer import join_printed
from kappa.reader.parser import read_str
from kappa.types import (
    Atom,
    Environment,
    Function,
    Keyword,
    List,
    NativeFunction,
    Nil,
    Symbol,
    Vector,
    check_map_key,
    is_equal,
    is_sequential,
    make_map,
)


def arity(n: int) -> Callable:
    """Reject calls with other than `n` arguments before reaching the builtin."""
    def decorate(fn):
        @wraps(fn)
        def checked(*args):
            if len(args) != n:
                raise KappaArityError(
                    f"Wrong number of arguments: expected {n}, got {len(args)}"
                )
            return fn(*args)
        return checked
    return decorate


def _kind(x: LispValue) -> str:
    return type(x).__name__


def _int(name: str, x: LispValue) -> int:
    # bool is a subclass of int; it is not a number here
    if type(x) is not int:
        raise KappaTypeError(f"{name} expects integers, got {_kind(x)}")
    return x


def _seq(name: str, x: LispValue) -> tuple:
    if not is_sequential(x):
        raise KappaTypeError(f"{name} expects a list or vector, got {_kind(x)}")
    return x


def _map(name: str, x: LispValue) -> dict:
    if not isinstance(x, dict):
        raise KappaTypeError(f"{name} expects a map, got {_kind(x)}")
    return x


def _atom(name: str, x: LispValue) -> Atom:
    if not isinstance(x, Atom):
        raise KappaTypeError(f"{name} expects an atom, got {_kind(x)}")
    return x


def _fn(name: str, x: LispValue) -> Function:
    if not isinstance(x, Function):
        raise KappaTypeError(f"{name} expects a function, got {_kind(x)}")
    return x


def _str(name: str, x: LispValue) -> str:
    if type(x) is not str:
        raise KappaTypeError(f"{name} expects a string, got {_kind(x)}")
    return x


# -------------------------------
# Errors
# -------------------------------
@arity(1)
def throw(value: LispValue) -> LispValue:
    """Raise `value` as the error payload."""
    raise ThrowException(value)


# -------------------------------
# Arithmetic
# -------------------------------
@arity(2)
def add(a, b) -> int:
    return _int("+", a) + _int("+", b)


@arity(2)
def sub(a, b) -> int:
    return _int("-", a) - _int("-", b)


@arity(2)
def mul(a, b) -> int:
    return _int("*", a) * _int("*", b)


@arity(2)
def div(a, b) -> int:
    """Integer division rounding toward negative infinity: (/ -7 2) => -4."""
    n, d = _int("/", a), _int("/", b)
    if d == 0:
        raise KappaZeroDivisionError("Division by zero")
    return n // d


# -------------------------------
# Comparison
# -------------------------------
@arity(2)
def equals(a, b) -> bool:
    return is_equal(a, b)


@arity(2)
def lt(a, b) -> bool:
    return _int("<", a) < _int("<", b)


@arity(2)
def lte(a, b) -> bool:
    return _int("<=", a) <= _int("<=", b)


@arity(2)
def gt(a, b) -> bool:
    return _int(">", a) > _int(">", b)


@arity(2)
def gte(a, b) -> bool:
    return _int(">=", a) >= _int(">=", b)


# -------------------------------
# Sequences
# -------------------------------
@arity(2)
def cons(head, tail) -> List:
    """Prepend `head` to a list or vector; the result is always a list."""
    return List((head, *_seq("cons", tail)))


def concat(*seqs) -> List:
    """Flatten any number of lists/vectors into one list."""
    return List(x for s in seqs for x in _seq("concat", s))


def list_builtin(*items) -> List:
    """Construct a list from the provided arguments."""
    return List(items)


@arity(1)
def is_list(x) -> bool:
    return isinstance(x, List)


@arity(1)
def is_empty(xs) -> bool:
    return len(_seq("empty?", xs)) == 0


@arity(1)
def count(xs) -> int:
    """Length of a list or vector; anything else (nil included) counts as 0."""
    return len(xs) if is_sequential(xs) else 0


@arity(2)
def nth(xs, index) -> LispValue:
    items = _seq("nth", xs)
    i = _int("nth", index)
    if not 0 <= i < len(items):
        raise KappaIndexError(f"nth: index {i} out of range for length {len(items)}")
    return items[i]


@arity(1)
def first(xs) -> LispValue:
    """First element; nil for nil or an empty sequence."""
    if xs is Nil:
        return Nil
    items = _seq("first", xs)
    return items[0] if items else Nil


@arity(1)
def rest(xs) -> List:
    """All but the first element as a list; the empty list for nil."""
    if xs is Nil:
        return List()
    return List(_seq("rest", xs)[1:])


# -------------------------------
# Higher-order
# -------------------------------
def apply(fn, *args) -> LispValue:
    """(apply f a b [c d]) calls (f a b c d): the last argument is spread."""
    if not args:
        raise KappaArityError("apply requires a function and a list of arguments")
    f = _fn("apply", fn)
    *leading, spread = args
    return f(*leading, *_seq("apply", spread))


@arity(2)
def map_builtin(fn, xs) -> List:
    f = _fn("map", fn)
    return List(f(x) for x in _seq("map", xs))


# -------------------------------
# Maps
# -------------------------------
@arity(1)
def is_map(x) -> bool:
    return isinstance(x, dict)


def hash_map(*kvs) -> dict:
    return make_map(kvs)


def assoc(m, *kvs) -> dict:
    """New map with the given key/value pairs merged over `m`."""
    return make_map(kvs, base=_map("assoc", m))


def dissoc(m, *keys) -> dict:
    """New map without the given keys; missing keys are ignored."""
    result = dict(_map("dissoc", m))
    for k in keys:
        result.pop(check_map_key(k), None)
    return result


@arity(2)
def get(m, key) -> LispValue:
    if m is Nil:
        return Nil
    return _map("get", m).get(check_map_key(key), Nil)


@arity(2)
def contains(m, key) -> bool:
    return check_map_key(key) in _map("contains?", m)


@arity(1)
def keys(m) -> List:
    return List(_map("keys", m).keys())


@arity(1)
def vals(m) -> List:
    return List(_map("vals", m).values())


# -------------------------------
# Predicates
# -------------------------------
@arity(1)
def is_sequential_builtin(x) -> bool:
    return is_sequential(x)


@arity(1)
def is_vector(x) -> bool:
    return isinstance(x, Vector)


@arity(1)
def is_symbol(x) -> bool:
    return isinstance(x, Symbol)


@arity(1)
def is_keyword(x) -> bool:
    return isinstance(x, Keyword)


@arity(1)
def is_nil(x) -> bool:
    return x is Nil


@arity(1)
def is_true(x) -> bool:
    return x is True


@arity(1)
def is_false(x) -> bool:
    return x is False


# -------------------------------
# Conversions
# -------------------------------
@arity(1)
def symbol(name) -> Symbol:
    return Symbol(_str("symbol", name))


@arity(1)
def keyword(name) -> Keyword:
    if isinstance(name, Keyword):
        return name
    return Keyword(_str("keyword", name))


def vector(*items) -> Vector:
    return Vector(items)


@arity(1)
def vec(xs) -> Vector:
    if isinstance(xs, Vector):
        return xs
    if not isinstance(xs, List):
        raise KappaTypeError(f"vec expects a list or vector, got {_kind(xs)}")
    return Vector(xs)


# -------------------------------
# Text I/O
# -------------------------------
def pr_str_builtin(*args) -> str:
    return join_printed(args, True, " ")


def str_builtin(*args) -> str:
    return join_printed(args, False, "")


def prn(*args) -> LispValue:
    print(join_printed(args, True, " "))
    return Nil


def println(*args) -> LispValue:
    print(join_printed(args, False, " "))
    return Nil


@arity(1)
def read_string(text) -> LispValue:
    result = read_str(_str("read-string", text))
    return Nil if result is None else result


@arity(1)
def slurp(path) -> str:
    filename = _str("slurp", path)
    try:
        return Path(filename).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as ex:
        raise KappaIOError(f"slurp: cannot read {filename}: {ex}") from ex


# -------------------------------
# Atoms
# -------------------------------
@arity(1)
def atom(value) -> Atom:
    return Atom(value)


@arity(1)
def is_atom(x) -> bool:
    return isinstance(x, Atom)


@arity(1)
def deref(a) -> LispValue:
    return _atom("deref", a).value


@arity(2)
def reset(a, value) -> LispValue:
    return _atom("reset!", a).reset(value)


def swap(a, fn, *args) -> LispValue:
    """(swap! a f x y) sets a to (f @a x y) and returns the new value."""
    cell = _atom("swap!", a)
    f = _fn("swap!", fn)
    return cell.reset(f(cell.value, *args))


BUILTINS: dict[str, Callable[..., LispValue]] = {
    "throw": throw,
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": equals,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "cons": cons,
    "concat": concat,
    "list": list_builtin,
    "list?": is_list,
    "empty?": is_empty,
    "count": count,
    "nth": nth,
    "first": first,
    "rest": rest,
    "apply": apply,
    "map": map_builtin,
    "map?": is_map,
    "hash-map": hash_map,
    "assoc": assoc,
    "dissoc": dissoc,
    "get": get,
    "contains?": contains,
    "keys": keys,
    "vals": vals,
    "sequential?": is_sequential_builtin,
    "vector?": is_vector,
    "symbol?": is_symbol,
    "keyword?": is_keyword,
    "nil?": is_nil,
    "true?": is_true,
    "false?": is_false,
    "symbol": symbol,
    "keyword": keyword,
    "vector": vector,
    "vec": vec,
    "pr-str": pr_str_builtin,
    "str": str_builtin,
    "prn": prn,
    "println": println,
    "read-string": read_string,
    "slurp": slurp,
    "atom": atom,
    "atom?": is_atom,
    "deref": deref,
    "reset!": reset,
    "swap!": swap,
}


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    env.update({Symbol(name): NativeFunction(name, fn) for name, fn in BUILTINS.items()})
