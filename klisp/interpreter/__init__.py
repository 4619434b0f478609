from __future__ import annotations

import logging
from typing import Iterable, Mapping

from klisp import LispValue, SExpression
from klisp.builtin.env_builtin import create_global_env
from klisp.errors import KlispRuntimeError
from klisp.evaluation.evaluator import evaluate
from klisp.reader.parser import read_program
from klisp.types.environment import Environment
from klisp.types.nil import Nil
from klisp.types.symbol import Symbol

logger = logging.getLogger(__name__)

TABLE = Symbol("table")


class Interpreter:
    """
    Reads and evaluates klisp programs against one global environment that
    persists across calls, so definitions from earlier programs stay visible.
    """

    def __init__(self, bindings: Mapping[Symbol, LispValue] | None = None):
        self.env: Environment = create_global_env()
        if bindings:
            self.env.update(bindings)

    def eval_forms(self, exprs: Iterable[SExpression]) -> LispValue:
        """Evaluate parsed top-level forms in order; return the last value."""
        result: LispValue = Nil
        try:
            for expr in exprs:
                result = evaluate(expr, self.env)
        except RecursionError as e:
            raise KlispRuntimeError("maximum recursion depth exceeded") from e
        return result

    def eval(self, code: str) -> LispValue:
        """Evaluate every top-level form of `code` in order and return the
        value of the last one (Nil for a program with no forms).

        Raises KlispSyntaxError for unparsable text before anything is evaluated.
        """
        exprs = read_program(code)
        logger.debug("evaluating %d top-level form(s)", len(exprs))
        result = self.eval_forms(exprs)
        logger.debug("result: %s", result)
        return result

    def run(self, program: str, table: LispValue = Nil) -> LispValue:
        """Bind `table` and evaluate `program` against it."""
        self.env.define(TABLE, table)
        return self.eval(program)


def run_program(program: str, table: LispValue = Nil) -> LispValue:
    """Evaluate `program` in a fresh global environment with `table` bound."""
    return Interpreter().run(program, table)
