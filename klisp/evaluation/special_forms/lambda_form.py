from klisp.errors import KlispArityError, KlispTypeError
from klisp.types.lambda_fn import Lambda

from klisp import EvaluatorFn
from klisp import SExpression, LispValue
from klisp.types.environment import Environment
from klisp.types.nil import Nil
from klisp.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body...) needs at least one body form; several body
    # forms run in order and the last one gives the result.
    if len(tail) < 2:
        raise KlispArityError("at least 2", len(tail))

    params = tail[0]
    # `()` reads as Nil: a lambda taking no arguments.
    if params is Nil:
        params = []
    if not isinstance(params, list):
        raise KlispTypeError("lambda requires a parameter list")
    if not all(isinstance(p, Symbol) for p in params):
        raise KlispTypeError("lambda parameters must be symbols")

    return Lambda(list(params), list(tail[1:]), env)
