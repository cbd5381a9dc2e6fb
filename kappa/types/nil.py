from __future__ import annotations


class NilType:
    """The `nil` value. Falsy, and equal only to itself."""

    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(None)


Nil = NilType()
