"""Function values: native operations and closures.

Both variants are invoked the same way, `fn(*args)`, so builtins such as
`map`, `apply` and `swap!` do not need to know where a function came from.
"""

from __future__ import annotations

from typing import Callable

from kappa import SExpression, LispValue
from kappa.errors import KappaArityError
from kappa.types.environment import Environment
from kappa.types.symbol import Symbol


class Function:
    """Common base so `isinstance(x, Function)` covers every callable value."""

    __slots__ = ()

    def __call__(self, *args: LispValue) -> LispValue:
        raise NotImplementedError


class NativeFunction(Function):
    """A builtin implemented in Python. `fn` receives the evaluated arguments."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[..., LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, *args: LispValue) -> LispValue:
        return self.fn(*args)

    def __repr__(self) -> str:
        return f"<native {self.name}>"


class Closure(Function):
    """A first-class fn* value with parameters, body, and captured env."""

    __slots__ = ("params", "body", "env", "debug")

    def __init__(
        self,
        params: list[Symbol],
        body: SExpression,
        env: Environment,
        debug: bool = False,
    ):
        self.params: list[Symbol] = params
        self.body: SExpression = body
        # Captured by reference, never copied
        self.env: Environment = env
        self.debug = debug

    def bind(self, args: tuple | list) -> Environment:
        """Return a new frame, child of the captured env, binding params to args."""
        if len(args) != len(self.params):
            raise KappaArityError(
                f"Function expects {len(self.params)} argument(s), got {len(args)}"
            )
        return Environment(self.env, self.params, args)

    def __call__(self, *args: LispValue) -> LispValue:
        # Lazy import: the evaluator depends on this module
        from kappa.evaluation.evaluator import evaluate
        return evaluate(self.body, self.bind(args), self.debug)

    def __repr__(self) -> str:
        return f"<fn* ({' '.join(str(p) for p in self.params)})>"
