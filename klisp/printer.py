"""Rendering of parsed expressions and runtime values back to Lisp text."""

from __future__ import annotations

from io import StringIO

from klisp import LispValue, SExpression
from klisp.reader.ast import DottedList
from klisp.types.cons import Cons
from klisp.types.lambda_fn import Lambda
from klisp.types.nil import Nil
from klisp.types.symbol import Symbol


def render_sexpr(expr: SExpression) -> str:
    """Canonical source text for a parsed expression.

    Dotted lists keep their dot even when the tail is a proper list, so the
    output reads back to an identical tree.
    """
    if isinstance(expr, DottedList):
        head = " ".join(render_sexpr(e) for e in expr.items)
        return f"({head} . {render_sexpr(expr.tail)})"
    if isinstance(expr, list):
        return "(" + " ".join(render_sexpr(e) for e in expr) + ")"
    return _render_atom(expr)


def render_value(value: LispValue) -> str:
    """Display form of a runtime value, e.g. `(a 1 "two" . c)`."""
    if isinstance(value, Cons):
        with StringIO() as buffer:
            buffer.write("(")
            buffer.write(render_value(value.car))
            current = value.cdr
            while isinstance(current, Cons):
                buffer.write(" ")
                buffer.write(render_value(current.car))
                current = current.cdr
            if current is not Nil:
                buffer.write(" . ")
                buffer.write(render_value(current))
            buffer.write(")")
            return buffer.getvalue()
    if isinstance(value, bool):
        return "#t" if value else "#f"
    if isinstance(value, Lambda):
        return "#<lambda>"
    if callable(value):
        return "#<primitive>"
    return _render_atom(value)


def _render_atom(atom) -> str:
    if atom is Nil:
        return "()"
    if isinstance(atom, str):
        return f'"{atom}"'
    if isinstance(atom, (Symbol, int)):
        return str(atom)
    raise TypeError(f"Cannot render {atom!r}")
