"""Error taxonomy for Kappa.

`KappaError` and its subclasses are contract failures raised by the runtime
itself. Values raised from Lisp code with `throw` travel as ThrowException,
which is intentionally outside the KappaError tree.
"""

from typing import Any


class KappaError(Exception):
    """ Base class for all Kappa errors"""
    pass


class KappaUnboundSymbol(KappaError):
    """ Raised when a symbol is used before it is bound"""
    pass


class KappaTypeError(KappaError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class KappaArityError(KappaTypeError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class KappaIndexError(KappaError):
    """ Raised when a sequence index is out of range"""


class KappaIOError(KappaError):
    """ Raised when a file cannot be read"""


class KappaSyntaxError(KappaError):
    """ Raised when there is a syntax error"""


class KappaZeroDivisionError(KappaError):
    """ Raised on integer division by zero"""


class ThrowException(Exception):
    """Carries an arbitrary Lisp value raised by the `throw` primitive."""

    def __init__(self, value: Any):
        super().__init__(f"ThrowException(value={value!r})")
        self.value: Any = value
