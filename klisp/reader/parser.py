"""
  Lisp Reader

A small set of mutually recursive parse functions. Each one takes the source
text and a position and returns either `(new_position, value)` on success or
None when its construct is not present there. Alternatives are tried in order
and a failing alternative consumes nothing, so backtracking is free.

Grammar (whitespace and `;` comments may precede every token):

    sexpr   := quoted | list | atom
    quoted  := "'" sexpr                     -> (quote sexpr)
    list    := "(" ")"                       -> Nil
             | "(" sexpr+ ")"                -> list
             | "(" sexpr+ "." sexpr ")"      -> DottedList
    atom    := number | string | symbol
"""

from __future__ import annotations

import re
from typing import Callable, Optional, TypeVar

from klisp.errors import KlispSyntaxError
from klisp.reader.ast import DottedList, Sexpr
from klisp.reader.whitespace import skip_ws
from klisp.types.nil import Nil
from klisp.types.symbol import Symbol

T = TypeVar("T")
ParseResult = Optional[tuple[int, T]]
ParseFn = Callable[[str, int], ParseResult]

INT64_MAX = 2**63 - 1
INT64_DIGITS = len(str(INT64_MAX))

NUMBER_RE = re.compile(r"[0-9]+")
STRING_RE = re.compile(r'"([^"]*)"')
SYMBOL_RE = re.compile(r"[A-Za-z+\-*/><=?][A-Za-z0-9\-?!]*")

QUOTE = Symbol("quote")


def parse_number(source: str, pos: int) -> ParseResult[int]:
    m = NUMBER_RE.match(source, pos)
    # Longer digit runs cannot fit in 64 bits; reject before converting.
    if not m or len(m.group().lstrip("0")) > INT64_DIGITS:
        return None
    value = int(m.group())
    if value > INT64_MAX:
        return None
    return m.end(), value


def parse_string(source: str, pos: int) -> ParseResult[str]:
    # No escape sequences: everything up to the next double quote.
    m = STRING_RE.match(source, pos)
    if not m:
        return None
    return m.end(), m.group(1)


def parse_symbol(source: str, pos: int) -> ParseResult[Symbol]:
    m = SYMBOL_RE.match(source, pos)
    if not m:
        return None
    return m.end(), Symbol(m.group())


# Numbers go first: a run of digits must never be read as a symbol.
ATOM_PARSERS: tuple[ParseFn, ...] = (parse_number, parse_string, parse_symbol)


def parse_atom(source: str, pos: int) -> ParseResult:
    for parser in ATOM_PARSERS:
        result = parser(source, pos)
        if result is not None:
            return result
    return None


def parse_quoted(source: str, pos: int) -> ParseResult[list]:
    if not source.startswith("'", pos):
        return None
    result = parse_sexpr(source, pos + 1)
    if result is None:
        return None
    pos, expr = result
    return pos, [QUOTE, expr]


def parse_list(source: str, pos: int) -> ParseResult[Sexpr]:
    if not source.startswith("(", pos):
        return None
    pos = skip_ws(source, pos + 1)
    if source.startswith(")", pos):
        return pos + 1, Nil

    items: list[Sexpr] = []
    while True:
        pos = skip_ws(source, pos)
        if source.startswith(")", pos) or source.startswith(".", pos):
            break
        result = parse_sexpr(source, pos)
        if result is None:
            return None
        pos, expr = result
        items.append(expr)

    if source.startswith(".", pos):
        if not items:
            return None
        result = parse_sexpr(source, pos + 1)
        if result is None:
            return None
        pos, tail = result
        pos = skip_ws(source, pos)
        if not source.startswith(")", pos):
            return None
        return pos + 1, DottedList(items, tail)

    return pos + 1, items


SEXPR_PARSERS: tuple[ParseFn, ...] = (parse_quoted, parse_list, parse_atom)


def parse_sexpr(source: str, pos: int) -> ParseResult[Sexpr]:
    """Parse exactly one expression, skipping leading whitespace and comments."""
    pos = skip_ws(source, pos)
    for parser in SEXPR_PARSERS:
        result = parser(source, pos)
        if result is not None:
            return result
    return None


def parse_at(source: str, pos: int = 0) -> tuple[int, list[Sexpr]]:
    """Parse as many top-level expressions as possible starting at `pos`.

    Returns the position where reading stopped together with the expressions.
    Whitespace after the last expression is left unconsumed. Nesting deeper
    than the Python stack allows ends reading like any other malformed input.
    """
    exprs: list[Sexpr] = []
    while True:
        try:
            result = parse_sexpr(source, pos)
        except RecursionError:
            result = None
        if result is None:
            return pos, exprs
        pos, expr = result
        exprs.append(expr)


def parse(source: str) -> tuple[str, list[Sexpr]]:
    """Parse a sequence of top-level expressions.

    Never raises: reading stops at the first point where no expression can be
    recognised and the unconsumed text is returned alongside the expressions.
    Callers decide whether a non-blank remainder is an error.
    """
    pos, exprs = parse_at(source)
    return source[pos:], exprs


def read_program(source: str) -> list[Sexpr]:
    """Parse a complete program, rejecting any trailing unparsable text."""
    pos, exprs = parse_at(source)
    pos = skip_ws(source, pos)
    if pos < len(source):
        raise KlispSyntaxError("Unparsed input", pos, source[pos:])
    return exprs
