"""Syntax tree produced by the reader.

Parsed code uses plain Python values where it can:

    - nil (the empty list `()`) -> Nil
    - symbols -> Symbol
    - numbers -> int (signed 64-bit range)
    - strings -> str
    - proper lists -> list (never empty)
    - dotted lists -> DottedList(items, tail), `items` never empty
"""

from __future__ import annotations

from typing import NamedTuple, Union

from klisp.types.nil import NilType
from klisp.types.symbol import Symbol

Atom = Union[NilType, Symbol, int, str]
Sexpr = Union[Atom, list, "DottedList"]


class DottedList(NamedTuple):
    """An improper list such as `(a b . c)`."""

    items: list
    tail: Sexpr


def is_atom(expr: Sexpr) -> bool:
    return not isinstance(expr, (list, DottedList))
