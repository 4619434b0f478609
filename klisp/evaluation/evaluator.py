"""Core evaluator for the klisp interpreter.

A plain recursive walk over the syntax tree: atoms evaluate to themselves,
symbols are looked up, special forms are dispatched by head symbol, and any
other list is a function call. Recursion depth is bounded by the Python stack.
"""

from __future__ import annotations

from klisp import SExpression, LispValue
from klisp.evaluation.apply import apply
from klisp.evaluation.special_forms import SPECIAL_FORMS
from klisp.reader.ast import DottedList
from klisp.types.cons import Cons
from klisp.types.environment import Environment
from klisp.types.nil import Nil
from klisp.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate one expression in `env`.

    Definitions made by the expression land in `env` itself. The first error
    raised while evaluating operands or body forms aborts the rest.
    """
    match expr:
        case DottedList(items=items, tail=tail):
            return evaluate_dotted_list(items, tail, env)

        case [head, *tail_args] if isinstance(expr, list):
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, evaluate)

            fn = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail_args]
            return apply(fn, args, env, evaluate)

        case []:
            return Nil

        case Symbol():
            return env.lookup(expr)

    # --- Atoms return as-is ---
    return expr


def evaluate_dotted_list(
    items: list[SExpression], tail: SExpression, env: Environment
) -> LispValue:
    """Build a Cons chain from `(a b . c)`: the tail first, then the items
    from right to left."""
    result = evaluate(tail, env)
    for item in reversed(items):
        result = Cons(evaluate(item, env), result)
    return result
