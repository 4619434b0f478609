"""Built-in functions for the klisp runtime environment.

Every builtin takes the calling environment and the list of evaluated
arguments, checks its own arity, and returns a Lisp value.
"""
from __future__ import annotations

from klisp import LispValue
from klisp.errors import KlispArityError, KlispTypeError
from klisp.evaluation.apply import apply as apply_engine
from klisp.evaluation.evaluator import evaluate
from klisp.types.cons import Cons, from_sequence, to_list
from klisp.types.environment import Environment
from klisp.types.nil import Nil
from klisp.types.symbol import Symbol
from klisp.types.values import is_equal


def _expect_arity(expr: list[LispValue], n: int) -> None:
    if len(expr) != n:
        raise KlispArityError(n, len(expr))


# -------------------------------
# Pairs
# -------------------------------
def cons(env: Environment, expr: list[LispValue]) -> Cons:
    """(cons a b) -> the pair (a . b)."""
    _expect_arity(expr, 2)
    return Cons(expr[0], expr[1])


def car(env: Environment, expr: list[LispValue]) -> LispValue:
    _expect_arity(expr, 1)
    pair = expr[0]
    if not isinstance(pair, Cons):
        raise KlispTypeError("car requires a cons cell")
    return pair.car


def cdr(env: Environment, expr: list[LispValue]) -> LispValue:
    _expect_arity(expr, 1)
    pair = expr[0]
    if not isinstance(pair, Cons):
        raise KlispTypeError("cdr requires a cons cell")
    return pair.cdr


# -------------------------------
# Predicates
# -------------------------------
def is_null(env: Environment, expr: list[LispValue]) -> bool:
    """(null? v) -> #t only for the empty list."""
    _expect_arity(expr, 1)
    return expr[0] is Nil


def equal(env: Environment, expr: list[LispValue]) -> bool:
    """(equal? a b) -> structural equality; functions never compare equal."""
    _expect_arity(expr, 2)
    return is_equal(expr[0], expr[1])


# -------------------------------
# Association lists and tables
# -------------------------------
def assoc(env: Environment, expr: list[LispValue]) -> LispValue:
    """(assoc key alist) -> first pair in `alist` whose car is equal? to `key`, or ()."""
    _expect_arity(expr, 2)
    key, current = expr
    while isinstance(current, Cons):
        pair = current.car
        if not isinstance(pair, Cons):
            raise KlispTypeError("assoc requires a list of pairs")
        if is_equal(key, pair.car):
            return pair
        current = current.cdr
    if current is not Nil:
        raise KlispTypeError("assoc requires a proper list")
    return Nil


def _group_key(value: LispValue) -> str:
    if isinstance(value, (str, Symbol)):
        return str(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise KlispTypeError("group-by key must be string, symbol, or number")


def group_by(env: Environment, expr: list[LispValue]) -> LispValue:
    """(group-by table key-fn) -> alist of ("key" . rows) pairs.

    `key-fn` is called once per row, in table order. Rows inside each group keep
    their table order; the order of the groups themselves is unspecified.
    """
    _expect_arity(expr, 2)
    table, key_fn = expr
    rows = to_list(table, "group-by")

    groups: dict[str, list[LispValue]] = {}
    for row in rows:
        key = _group_key(apply_engine(key_fn, [row], env, evaluate))
        groups.setdefault(key, []).append(row)

    return from_sequence(
        Cons(key, from_sequence(group_rows)) for key, group_rows in groups.items()
    )


BUILTINS = {
    Symbol("cons"): cons,
    Symbol("car"): car,
    Symbol("cdr"): cdr,
    Symbol("null?"): is_null,
    Symbol("equal?"): equal,
    Symbol("assoc"): assoc,
    Symbol("group-by"): group_by,
}


def register(env: Environment) -> None:
    """Install the builtin library into `env`."""
    env.update(BUILTINS)


def create_global_env() -> Environment:
    """A fresh root environment holding only the builtins."""
    env = Environment()
    register(env)
    return env
