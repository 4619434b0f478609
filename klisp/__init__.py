# Core type aliases for klisp's data model.
#
# Naming guidance:
# - SExpression: parsed code, as produced by the reader (see klisp.reader.ast).
# - LispValue:  runtime values produced by the evaluator.
# Both aliases resolve to `Any`; the concrete shapes are documented where they
# are built.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
# Parsed code alias
SExpression = Any

# Evaluator function type, handed to special forms and the application engine
EvaluatorFn = Callable[..., LispValue]

from klisp.errors import (  # noqa: E402
    KlispError,
    KlispArityError,
    KlispRuntimeError,
    KlispSyntaxError,
    KlispTypeError,
    UndefinedVariable,
)
from klisp.types.nil import Nil  # noqa: E402
from klisp.types.symbol import Symbol  # noqa: E402
from klisp.types.cons import Cons  # noqa: E402
from klisp.types.environment import Environment  # noqa: E402
from klisp.types.lambda_fn import Lambda  # noqa: E402
from klisp.reader.ast import DottedList  # noqa: E402
from klisp.reader.parser import parse, read_program  # noqa: E402
from klisp.evaluation.evaluator import evaluate  # noqa: E402
from klisp.builtin.env_builtin import create_global_env  # noqa: E402
from klisp.interpreter import Interpreter, run_program  # noqa: E402
from klisp.printer import render_sexpr, render_value  # noqa: E402
