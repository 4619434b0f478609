import pytest

from klisp.builtin.env_builtin import create_global_env
from klisp.errors import KlispArityError, KlispTypeError, UndefinedVariable
from klisp.evaluation.evaluator import evaluate
from klisp.reader.ast import DottedList
from klisp.types.cons import Cons, from_sequence
from klisp.types.environment import Environment
from klisp.types.lambda_fn import Lambda
from klisp.types.nil import Nil
from klisp.types.symbol import Symbol

# -----------------------------------------------------
# Self-evaluating atoms and lookup
# -----------------------------------------------------

def test_self_evaluating_literals():
    env = Environment()
    assert evaluate(42, env) == 42
    assert evaluate("hello", env) == "hello"
    assert evaluate(Nil, env) is Nil
    assert evaluate([], env) is Nil


def test_symbol_lookup(env):
    env.define(Symbol("x"), 42)
    assert evaluate(Symbol("x"), env) == 42
    with pytest.raises(UndefinedVariable) as info:
        evaluate(Symbol("z"), env)
    assert info.value.name == "z"


# -----------------------------------------------------
# quote
# -----------------------------------------------------

def test_quote_symbol(run):
    assert run("'x") == Symbol("x")


def test_quote_list_builds_cons_chain(run):
    assert run("'(a 1 \"two\")") == from_sequence([Symbol("a"), 1, "two"])


def test_quote_nested_and_dotted(run):
    result = run("'((a . 1) (b c . d))")
    assert result == from_sequence([
        Cons(Symbol("a"), 1),
        from_sequence([Symbol("b"), Symbol("c")], Symbol("d")),
    ])


def test_quote_does_not_evaluate(run):
    # `undefined` would raise if it were looked up
    assert run("(quote (undefined))") == Cons(Symbol("undefined"), Nil)


def test_quoted_dotted_list_with_list_tail_equals_proper_list(run):
    assert run("'(a . (b c))") == run("'(a b c)")


@pytest.mark.parametrize("code, got", [("(quote)", 0), ("(quote a b)", 2)])
def test_quote_arity(run, code, got):
    with pytest.raises(KlispArityError) as info:
        run(code)
    assert (info.value.expected, info.value.got) == (1, got)


# -----------------------------------------------------
# define
# -----------------------------------------------------

def test_define_returns_value_and_binds(run, env):
    assert run("(define x 42)") == 42
    assert env.lookup(Symbol("x")) == 42


def test_define_evaluates_expression(run):
    assert run("(define x (cons 1 2)) x") == Cons(1, 2)


def test_define_rebinds_in_same_frame(run):
    assert run("(define x 1) (define x 2) x") == 2


def test_define_requires_symbol(run):
    with pytest.raises(KlispTypeError):
        run('(define "x" 1)')


def test_define_arity(run):
    with pytest.raises(KlispArityError) as info:
        run("(define x)")
    assert (info.value.expected, info.value.got) == (2, 1)


# -----------------------------------------------------
# lambda and application
# -----------------------------------------------------

def test_lambda_creates_closure(run, env):
    lam = run("(lambda (x) x)")
    assert isinstance(lam, Lambda)
    assert lam.formals == [Symbol("x")]
    assert lam.env is env


def test_lambda_identity(run):
    assert run("(define id (lambda (x) x)) (id 42)") == 42


def test_lambda_two_params(run):
    assert run("(define first (lambda (x y) x)) (first 10 20)") == 10


def test_lambda_without_params(run):
    assert run("((lambda () 7))") == 7


def test_lambda_multiple_body_expressions(run, env):
    result = run("""
        (define f (lambda (x)
            (define y (cons x 1))
            y))
        (f 42)
    """)
    assert result == Cons(42, 1)
    # the inner define went into the call frame, not the global one
    assert Symbol("y") not in env


def test_closure_captures_environment(run):
    result = run("""
        (define make-adder (lambda (n) (lambda (x) (cons n x))))
        (define add5 (make-adder 5))
        (add5 10)
    """)
    assert result == Cons(5, 10)


def test_closure_sees_later_definitions_in_captured_frame(run):
    assert run("""
        (define f (lambda () later))
        (define later 3)
        (f)
    """) == 3


def test_recursive_function(run):
    result = run("""
        (define last (lambda (lst)
            (if (null? (cdr lst)) (car lst) (last (cdr lst)))))
        (last '(1 2 3 4))
    """)
    assert result == 4


def test_parameters_shadow_globals(run):
    assert run("(define x 1) ((lambda (x) x) 2)") == 2
    assert run("x") == 1


@pytest.mark.parametrize("call, got", [("(f 1)", 1), ("(f 1 2 3)", 3)])
def test_lambda_arity(run, call, got):
    run("(define f (lambda (a b) a))")
    with pytest.raises(KlispArityError) as info:
        run(call)
    assert (info.value.expected, info.value.got) == (2, got)


@pytest.mark.parametrize("code", ["(lambda)", "(lambda (x))"])
def test_lambda_form_arity(run, code):
    with pytest.raises(KlispArityError) as info:
        run(code)
    assert info.value.expected == "at least 2"


@pytest.mark.parametrize("code", ["(lambda x x)", "(lambda (x 1) x)", "(lambda (x . y) x)"])
def test_lambda_parameter_spec_errors(run, code):
    with pytest.raises(KlispTypeError):
        run(code)


@pytest.mark.parametrize("code", ["(1 2)", "(\"f\" 1)", "('(a) 1)"])
def test_apply_non_function(run, code):
    with pytest.raises(KlispTypeError):
        run(code)


def test_computed_head_is_applied(run):
    assert run("((if 1 car cdr) '(a . b))") == Symbol("a")


def test_first_error_stops_argument_evaluation(run, env):
    with pytest.raises(UndefinedVariable):
        run("(cons missing (define touched 1))")
    assert Symbol("touched") not in env


# -----------------------------------------------------
# if and truthiness
# -----------------------------------------------------

@pytest.mark.parametrize(
    "code, expected",
    [
        ("(if 0 1 2)", 1),
        ("(if () 1 2)", 2),
        ('(if "" 1 2)', 1),
        ("(if '(a) 1 2)", 1),
        ("(if (null? '()) 1 2)", 1),
        ("(if (null? 5) 1 2)", 2),
        ("(if (equal? 5 5) \"yes\" \"no\")", "yes"),
        ('(if (equal? 1 2) "first" (if (equal? 2 2) "second" "third"))', "second"),
    ],
)
def test_if_truthiness(run, code, expected):
    assert run(code) == expected


def test_if_evaluates_only_one_branch(run):
    assert run("(if 1 'ok undefined)") == Symbol("ok")
    assert run("(if () undefined 'ok)") == Symbol("ok")


@pytest.mark.parametrize("code, got", [("(if 1 2)", 2), ("(if 1 2 3 4)", 4)])
def test_if_arity(run, code, got):
    with pytest.raises(KlispArityError) as info:
        run(code)
    assert (info.value.expected, info.value.got) == (3, got)


def test_special_form_names_win_over_bindings(run):
    run("(define quote (lambda (x) 0))")
    assert run("(quote x)") == Symbol("x")


# -----------------------------------------------------
# dotted lists outside quote
# -----------------------------------------------------

def test_dotted_list_evaluates_to_cons_chain():
    env = create_global_env()
    env.define(Symbol("x"), 1)
    env.define(Symbol("y"), 2)
    expr = DottedList([Symbol("x"), 10], Symbol("y"))
    assert evaluate(expr, env) == Cons(1, Cons(10, 2))
