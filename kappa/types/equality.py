from kappa import LispValue
from kappa.types.atom import Atom
from kappa.types.function import Function
from kappa.types.sequence import is_sequential


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality for Lisp values.

    Lists and vectors compare element-wise with each other; maps compare by
    key set and recursively-equal values, ignoring order. Any other pair must
    be the same kind with the same payload; atoms and functions compare by
    identity.
    """
    if a is b:
        return True
    if is_sequential(a) and is_sequential(b):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, dict) and isinstance(b, dict):
        if a.keys() != b.keys():
            return False
        return all(is_equal(v, b[k]) for k, v in a.items())
    # type() rather than isinstance: True must not equal 1
    if type(a) is not type(b):
        return False
    if isinstance(a, (Atom, Function)):
        return False
    return a == b
