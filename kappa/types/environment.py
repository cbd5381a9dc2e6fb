"""Runtime environment for Kappa.

An Environment is one lexical frame mapping Symbols to evaluated values, with
an `outer` link to the enclosing frame. Frames are shared by reference: a
closure keeps its defining frame alive, and every holder sees the same
bindings.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from kappa import LispValue
from kappa.errors import KappaTypeError, KappaUnboundSymbol
from kappa.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(
        self,
        outer: Optional[Environment] = None,
        binds: Iterable[Symbol] = (),
        exprs: Iterable[LispValue] = (),
    ):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer
        # Positional binding; callers are responsible for matching counts
        for name, value in zip(binds, exprs):
            self.set(name, value)

    def set(self, name: Symbol, value: LispValue) -> LispValue:
        """Bind `name` to `value` in this frame only; outer frames are untouched."""
        if not isinstance(name, Symbol):
            raise KappaTypeError(f"Cannot bind {name!r}: not a symbol")
        self.vars[name] = value
        return value

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises KappaUnboundSymbol if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise KappaUnboundSymbol(f"'{name}' not found")
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.set(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Single-frame view with an indicator for the parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        # The root frame holds every builtin; keep debug output readable
        depth = 0
        env = self.outer
        while env is not None:
            depth += 1
            env = env.outer
        return f"<Environment {len(self.vars)} bindings, depth {depth}>"
