"""Lambda function representation and argument binding for klisp."""

from __future__ import annotations

from io import StringIO

from klisp import SExpression, LispValue
from klisp.errors import KlispArityError
from klisp.types.environment import Environment
from klisp.types.symbol import Symbol


class Lambda:
    """A first-class lambda with formal parameters, body forms, and closure env.

    `env` is the environment that was current when the lambda form was
    evaluated. It is held by reference, so definitions made there later are
    visible to the body (this is what lets a defined function call itself).
    """

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: list[SExpression], env: Environment):
        self.formals: list[Symbol] = formals
        self.body: list[SExpression] = body
        self.env: Environment = env

    def __eq__(self, other: object) -> bool:
        # Function identity is not observable from Lisp code.
        return False

    __hash__ = object.__hash__

    def __str__(self) -> str:
        return "#<lambda>"

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Lambda (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(f") body={len(self.body)} form(s)>")
            return buffer.getvalue()

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this lambda's formal parameters and
        return a new Environment, child of the closure env, for the body.
        """
        if len(args) != len(self.formals):
            raise KlispArityError(len(self.formals), len(args))
        new_env = Environment(outer=self.env)
        for formal, arg in zip(self.formals, args):
            new_env.define(formal, arg)
        return new_env
