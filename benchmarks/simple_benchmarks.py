from timeit import timeit

from minilisp.evaluation.evaluator import evaluate
from minilisp.interpreter import Interpreter
from minilisp.types.value import Number


def time_interpreter(setup: str, code: str, rounds: int) -> float:
    """Time the evaluator only. Runs `setup` once, parses `code` once, then
    repeatedly evaluates the same tree in a fresh top-level environment.
    """
    itp = Interpreter()
    if setup:
        itp.eval(setup)
    expr = itp.read(code)[0]
    # Warmup
    evaluate(expr, itp.new_environment())
    # Timed
    return timeit(lambda: evaluate(expr, itp.new_environment()), number=rounds)


# Micro-benchmark: lookup of the oldest binding under a deep binding stack

def bench_lookup_depth(depth: int = 1000, n_lookups: int = 10000) -> float:
    itp = Interpreter()
    env = itp.new_environment()
    key = itp.symbols.intern("answer")
    env.define(key, Number(42))
    for i in range(depth):
        env.define(itp.symbols.intern(f"v{i}"), Number(i))
    # Warmup
    for _ in range(1000):
        env.lookup(key)
    return timeit(lambda: env.lookup(key), number=n_lookups)


def bench_intern(n_names: int = 1000, rounds: int = 100) -> float:
    itp = Interpreter()
    names = [f"sym{i}" for i in range(n_names)]

    def _intern_all():
        for name in names:
            itp.symbols.intern(name)

    return timeit(_intern_all, number=rounds)


FACTORIAL_SETUP = "(defun fact (n) (if (<= n 1) 1 (* n (fact (- n 1)))))"
FIB_SETUP = "(defun fib (n) (if (< n 2) n (+ (fib (- n 1)) (fib (- n 2)))))"
ARITH_CODE = "(+ (* 3 4) (- 10 5) (/ 100 7) (car (cdr '(1 2 3))))"


def _print(name: str, setup: str, code: str, rounds: int) -> None:
    t = time_interpreter(setup, code, rounds)
    print(f"Benchmark: {name}")
    print(f"  interpreter: {t:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    print("Benchmark: environment lookup under 1000 bindings")
    print(f"  time: {bench_lookup_depth():.6f}s")
    print("Benchmark: interning 1000 names")
    print(f"  time: {bench_intern():.6f}s")

    _print("nested arithmetic", "", ARITH_CODE, rounds=20000)
    _print("recursive factorial 60", FACTORIAL_SETUP, "(fact 60)", rounds=500)
    _print("recursive fib 15", FIB_SETUP, "(fib 15)", rounds=20)
