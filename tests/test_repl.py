import io

import pytest

from klisp.interpreter import Interpreter
from klisp.repl import load_prelude, repl


def _feed(lines):
    it = iter(lines)

    def read_line(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read_line


def _session(lines, interp=None):
    out, err = io.StringIO(), io.StringIO()
    repl(interp, read_line=_feed(lines), out=out, err=err)
    return out.getvalue(), err.getvalue()


def test_repl_prints_results_and_keeps_state():
    out, err = _session(["(define x 5)", "", "(cons x 'y)"])
    assert "klisp REPL v" in out
    assert "5\n" in out
    assert "(5 . y)\n" in out
    assert out.endswith("^D\n")
    assert err == ""


def test_repl_reports_errors_and_continues():
    out, err = _session(["(car 1)", "(oops", "'done"])
    assert "Evaluation error: Type error: car requires a cons cell" in err
    assert "Parse error: Unparsed input" in err
    assert "done\n" in out


def test_repl_survives_deeply_nested_input():
    out, err = _session(["(" * 5000 + ")" * 5000, "'ok"])
    assert "Parse error: Unparsed input" in err
    assert "ok\n" in out


def test_repl_skips_comment_only_lines():
    out, _ = _session(["; nothing here"])
    assert "()" not in out


def test_repl_stops_on_interrupt():
    def read_line(prompt):
        raise KeyboardInterrupt

    out = io.StringIO()
    repl(read_line=read_line, out=out, err=io.StringIO())
    assert out.getvalue().endswith("^C\n")


def test_load_prelude(tmp_path, monkeypatch):
    prelude = tmp_path / "prelude.lisp"
    prelude.write_text("(define second (lambda (l) (car (cdr l))))\n", encoding="utf-8")
    monkeypatch.setenv("KLISP_PRELUDE_PATH", f"{prelude}:{tmp_path / 'missing.lisp'}")

    interp = Interpreter()
    load_prelude(interp)
    assert interp.eval("(second '(1 2 3))") == 2


@pytest.mark.parametrize("raw", ["abc", "0", "-5"])
def test_recursion_limit_must_be_positive_int(monkeypatch, raw):
    from klisp.config import get_recursion_limit

    monkeypatch.setenv("KLISP_RECURSION_LIMIT", raw)
    with pytest.raises(ValueError):
        get_recursion_limit()


def test_recursion_limit_default(monkeypatch):
    from klisp.config import get_recursion_limit

    monkeypatch.delenv("KLISP_RECURSION_LIMIT", raising=False)
    assert get_recursion_limit() is None
