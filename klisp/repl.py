"""Interactive read-eval-print loop for klisp.

Each line is read as a complete program and evaluated in one environment that
lives for the whole session. Errors are reported and the loop carries on.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, TextIO

from klisp import __version__
from klisp.config import get_log_level, get_prelude_paths, get_recursion_limit
from klisp.errors import KlispError, KlispSyntaxError
from klisp.interpreter import Interpreter
from klisp.printer import render_value
from klisp.reader.parser import read_program

logger = logging.getLogger(__name__)

PROMPT = "klisp> "


def load_prelude(interp: Interpreter) -> None:
    """Evaluate each configured prelude file into the session environment."""
    for path in get_prelude_paths():
        if not path.is_file():
            logger.warning("prelude file %s not found, skipping", path)
            continue
        logger.debug("loading prelude %s", path)
        interp.eval(path.read_text(encoding="utf-8"))


def repl(
    interp: Interpreter | None = None,
    read_line: Callable[[str], str] = input,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> None:
    out = out or sys.stdout
    err = err or sys.stderr
    interp = interp or Interpreter()

    print(f"klisp REPL v{__version__}", file=out)
    print("Type expressions to evaluate. Press Ctrl+C or Ctrl+D to exit.", file=out)
    print(file=out)

    while True:
        try:
            line = read_line(PROMPT)
        except EOFError:
            print("^D", file=out)
            break
        except KeyboardInterrupt:
            print("^C", file=out)
            break

        if not line.strip():
            continue

        try:
            exprs = read_program(line)
        except KlispSyntaxError as e:
            print(f"Parse error: {e}", file=err)
            continue
        if not exprs:
            continue

        try:
            result = interp.eval_forms(exprs)
        except KlispError as e:
            logger.debug("evaluation failed for %r", line, exc_info=True)
            print(f"Evaluation error: {e}", file=err)
            continue
        print(render_value(result), file=out)


def main() -> int:
    logging.basicConfig(level=get_log_level())
    limit = get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)

    interp = Interpreter()
    try:
        load_prelude(interp)
    except KlispError as e:
        print(f"Prelude error: {e}", file=sys.stderr)
        return 1
    repl(interp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
