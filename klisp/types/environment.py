"""Runtime environment for klisp.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. Every lambda call gets a fresh frame whose
`outer` is the environment captured by the closure.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from klisp import LispValue
from klisp.errors import KlispTypeError, UndefinedVariable
from klisp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, shadowing any outer binding.

        Raises KlispTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise KlispTypeError(f"Cannot define {name!r} as a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol, value: LispValue) -> None:
        """Rebind `name`, which must already be defined in this very frame.

        Bindings that live only in an outer frame are not reachable for
        mutation; they raise UndefinedVariable just like a missing name.
        """
        if name not in self.vars:
            raise UndefinedVariable(name)
        self.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, walking outwards to the root.

        Raises UndefinedVariable if not found.
        """
        env = self.find(name)
        if env is None:
            raise UndefinedVariable(name)
        return env.vars[name]

    def update(self, mapping: Mapping[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                with StringIO() as env_buf:
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
