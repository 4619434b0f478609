from klisp import EvaluatorFn
from klisp import SExpression, LispValue
from klisp.errors import KlispArityError
from klisp.types.environment import Environment
from klisp.types.values import is_truthy


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise KlispArityError(3, len(tail))

    test, then_expr, else_expr = tail
    if is_truthy(evaluate_fn(test, env)):
        return evaluate_fn(then_expr, env)
    return evaluate_fn(else_expr, env)
