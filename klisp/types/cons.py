"""Cons cells: the only compound runtime value.

A Cons never changes after construction, so chains of cells can share tails
freely and can never form a cycle.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from klisp import LispValue
from klisp.errors import KlispTypeError
from klisp.types.nil import Nil


class Cons:
    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue):
        object.__setattr__(self, "car", car)
        object.__setattr__(self, "cdr", cdr)

    def __setattr__(self, name, value):
        raise AttributeError("Cons cells are immutable")

    def __eq__(self, other: object) -> bool:
        from klisp.types.values import is_equal
        if not isinstance(other, Cons):
            return NotImplemented
        return is_equal(self, other)

    __hash__ = None

    def __iter__(self) -> Iterator[LispValue]:
        """Yield the cars along the chain, stopping at the first non-Cons cdr."""
        cell: LispValue = self
        while isinstance(cell, Cons):
            yield cell.car
            cell = cell.cdr

    def __repr__(self) -> str:
        return f"Cons({self.car!r}, {self.cdr!r})"

    def __str__(self) -> str:
        from klisp.printer import render_value
        return render_value(self)


def from_sequence(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a Cons chain holding `items` and ending in `tail`."""
    result = tail
    for item in reversed(list(items)):
        result = Cons(item, result)
    return result


def to_list(value: LispValue, what: str) -> list[LispValue]:
    """Flatten a proper list into a Python list.

    `what` names the caller in the error raised for an improper list.
    """
    items: list[LispValue] = []
    cell = value
    while isinstance(cell, Cons):
        items.append(cell.car)
        cell = cell.cdr
    if cell is not Nil:
        raise KlispTypeError(f"{what} requires a proper list")
    return items
