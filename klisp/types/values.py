"""Predicates over runtime values: truthiness and structural equality."""

from __future__ import annotations

from klisp import LispValue
from klisp.types.cons import Cons
from klisp.types.lambda_fn import Lambda
from klisp.types.nil import Nil


def is_truthy(value: LispValue) -> bool:
    """Lisp truthiness: anything not Nil or #f is true (0 and "" included)."""
    return value is not Nil and value is not False


def is_function(value: LispValue) -> bool:
    return isinstance(value, Lambda) or callable(value)


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality for data; functions are never equal to anything."""
    while True:
        if is_function(a) or is_function(b):
            return False
        if isinstance(a, Cons) and isinstance(b, Cons):
            if not is_equal(a.car, b.car):
                return False
            # Walk the spine iteratively so long lists don't exhaust the stack
            a, b = a.cdr, b.cdr
            continue
        if type(a) is not type(b):
            return False
        return a == b
