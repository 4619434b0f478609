from __future__ import annotations
import sys


class Symbol:
    """A Lisp identifier such as `define`, `ID-001` or `null?`.

    The same class serves the reader (symbol atoms) and the runtime (quoted
    symbols), so a quoted symbol compares equal to the name it was read from.
    """

    __slots__ = ("id",)

    def __init__(self, name: str):
        # Names are interned; equality and hashing only look at the string
        self.id = sys.intern(name)

    @property
    def name(self) -> str:
        return self.id

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash((Symbol, self.id))

    def __lt__(self, other: Symbol) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return self.id < other.id

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
