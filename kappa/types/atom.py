from __future__ import annotations

from kappa import LispValue


class Atom:
    """A mutable reference cell. Two atoms are only ever equal to themselves."""

    __slots__ = ("value",)

    def __init__(self, value: LispValue):
        self.value: LispValue = value

    def reset(self, value: LispValue) -> LispValue:
        self.value = value
        return value

    def __repr__(self):
        return f"Atom({self.value!r})"
