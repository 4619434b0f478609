from klisp import SExpression, LispValue, EvaluatorFn
from klisp.errors import KlispArityError
from klisp.reader.ast import DottedList
from klisp.types.cons import from_sequence
from klisp.types.environment import Environment


def sexpr_to_value(expr: SExpression) -> LispValue:
    """Turn parsed code into data without evaluating any of it.

    Lists become Cons chains and symbols stay symbols instead of being looked up.
    """
    if isinstance(expr, DottedList):
        return from_sequence(
            [sexpr_to_value(e) for e in expr.items], sexpr_to_value(expr.tail)
        )
    if isinstance(expr, list):
        return from_sequence([sexpr_to_value(e) for e in expr])
    return expr


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise KlispArityError(1, len(tail))
    return sexpr_to_value(tail[0])
