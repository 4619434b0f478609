"""Application engine for klisp.

Centralizes function application so the evaluator and builtins that call back
into Lisp code (such as group-by) share one set of rules:
- Lambdas require exactly as many arguments as they have formals, and run
  their body forms in a fresh frame whose parent is the closure environment.
- Python callables registered in the environment are called as fn(env, args).
"""

from __future__ import annotations

from typing import Callable

from klisp import LispValue, EvaluatorFn
from klisp.errors import KlispTypeError
from klisp.types.environment import Environment
from klisp.types.lambda_fn import Lambda
from klisp.types.nil import Nil


def apply_lambda(
    fn: Lambda, args: list[LispValue], evaluate_fn: EvaluatorFn
) -> LispValue:
    """Bind `args` to the formals of `fn` and evaluate its body in order.

    The value of the last body form is returned; the new frame is dropped
    afterwards unless a closure created inside it keeps it alive.
    """
    new_env = fn.extend_env(args)
    result: LispValue = Nil
    for form in fn.body:
        result = evaluate_fn(form, new_env)
    return result


def apply(
    head: Lambda | Callable[[Environment, list[LispValue]], LispValue] | object,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a Python callable; anything else is a type error."""
    if isinstance(head, Lambda):
        return apply_lambda(head, args, evaluate_fn)
    elif callable(head):
        return head(env, args)
    else:
        from klisp.printer import render_value
        raise KlispTypeError(f"Cannot apply non-function: {render_value(head)}")
