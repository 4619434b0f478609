from timeit import timeit

from klisp.builtin.env_builtin import create_global_env
from klisp.evaluation.evaluator import evaluate
from klisp.reader.parser import parse, read_program
from klisp.types.cons import Cons, from_sequence
from klisp.types.environment import Environment
from klisp.types.symbol import Symbol


def time_evaluator(setup: str, code: str, rounds: int) -> float:
    """Time the evaluator alone: parse once, then repeatedly evaluate the same
    tree in an environment prepared by `setup`.
    """
    env = create_global_env()
    for expr in read_program(setup):
        evaluate(expr, env)
    exprs = read_program(code)

    def run():
        for expr in exprs:
            evaluate(expr, env)

    # Warmup
    run()
    return timeit(run, number=rounds)


def time_reader(code: str, rounds: int) -> float:
    return timeit(lambda: parse(code), number=rounds)


# Environment lookup through a deep chain of frames

def bench_lookup_chain(n_envs: int = 1000, n_lookups: int = 10000) -> float:
    root = Environment()
    key = Symbol("answer")
    root.define(key, 42)
    env = root
    for _ in range(n_envs):
        env = Environment(outer=env)
    # Warmup
    for _ in range(1000):
        env.lookup(key)
    return timeit(lambda: env.lookup(key), number=n_lookups)


LAMBDA_APPLY_CODE = "((lambda (x y) (cons x y)) 1 2)"

# Walk a 100 element list recursively
LIST_WALK_SETUP = r"""
(define last (lambda (lst)
  (if (null? (cdr lst)) (car lst) (last (cdr lst)))))
(define nums '(""" + " ".join(str(i) for i in range(100)) + r"""))
"""
LIST_WALK_CODE = "(last nums)"

GROUP_BY_CODE = "(group-by table (lambda (row) (cdr (assoc 'category (cdr row)))))"


def _table(n_rows: int):
    rows = []
    for i in range(n_rows):
        fields = from_sequence([
            Cons(Symbol("amount"), i * 100),
            Cons(Symbol("category"), ("Food", "Rent", "Travel")[i % 3]),
        ])
        rows.append(Cons(Symbol(f"ID-{i + 1:03}"), fields))
    return from_sequence(rows)


def bench_group_by(n_rows: int = 1000, rounds: int = 50) -> float:
    env = create_global_env()
    env.define(Symbol("table"), _table(n_rows))
    (expr,) = read_program(GROUP_BY_CODE)
    evaluate(expr, env)
    return timeit(lambda: evaluate(expr, env), number=rounds)


if __name__ == "__main__":
    print("Benchmark: environment lookup chain")
    print(f"  time: {bench_lookup_chain():.6f}s")

    print("Benchmark: reader on the list-walk program")
    print(f"  time: {time_reader(LIST_WALK_SETUP, 2000):.6f}s  [rounds=2000]")

    print("Benchmark: lambda application")
    print(f"  time: {time_evaluator('', LAMBDA_APPLY_CODE, 20000):.6f}s  [rounds=20000]")

    print("Benchmark: recursive list walk (100 elements)")
    print(f"  time: {time_evaluator(LIST_WALK_SETUP, LIST_WALK_CODE, 500):.6f}s  [rounds=500]")

    print("Benchmark: group-by over 1000 rows")
    print(f"  time: {bench_group_by():.6f}s  [rounds=50]")
