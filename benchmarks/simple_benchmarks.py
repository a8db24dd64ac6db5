from timeit import timeit

from malt.interpreter import Interpreter
from malt.types.symbol import Symbol
from malt.types.environment import Environment
from malt.reader.parser import read_str
from malt.evaluation.evaluator import evaluate


def time_interpreter(code: str, rounds: int, setup: str = "") -> float:
    """Time the evaluator on one pre-parsed form; `setup` runs once beforehand."""
    itp = Interpreter(prelude=None)
    if setup:
        itp.eval(setup)
    expr = read_str(code)
    # Warmup
    evaluate(expr, itp.env)
    # Timed
    return timeit(lambda: evaluate(expr, itp.env), number=rounds)


# Micro-benchmark: environment lookup chain

def bench_lookup_chain(n_envs: int = 1000, n_lookups: int = 10000) -> float:
    # Build an environment chain with a binding at the root
    root = Environment()
    key = Symbol("answer")
    root.define(key, 42)
    env = root
    for _ in range(n_envs):
        env = env.child()
    # Warmup
    for _ in range(1000):
        env.lookup(key)
    # Timed
    return timeit(lambda: env.lookup(key), number=n_lookups)


LAMBDA_APPLY_CODE = "((fn* (x y) (+ x y)) 1 2)"

FACT_SETUP = r"""
(def! fact (fn* (n acc)
  (if (<= n 1)
      acc
      (fact (- n 1) (* n acc)))))
"""

SUM_SETUP = r"""
(def! sum-n (fn* (n acc)
  (if (<= n 0)
      acc
      (sum-n (- n 1) (+ acc n)))))
"""

LET_CHAIN_CODE = "(let* (a 1 b (+ a 1) c (+ b 1) d (+ c 1)) (* a (* b (* c d))))"


def _print(name: str, seconds: float, rounds: int) -> None:
    print(f"Benchmark: {name}")
    print(f"  time: {seconds:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    _print("environment lookup chain", bench_lookup_chain(), rounds=10000)
    _print("lambda application", time_interpreter(LAMBDA_APPLY_CODE, 20000), rounds=20000)
    _print("tail recursion (factorial)", time_interpreter("(fact 100 1)", 500, FACT_SETUP), rounds=500)
    _print("arithmetic sum 1..500 (tail-rec)", time_interpreter("(sum-n 500 0)", 1000, SUM_SETUP), rounds=1000)
    _print("sequential let*", time_interpreter(LET_CHAIN_CODE, 20000), rounds=20000)
    _print("deep tail loop (sum 1..100000)", time_interpreter("(sum-n 100000 0)", 3, SUM_SETUP), rounds=3)
