"""Built-in functions for the malt runtime environment.

This module defines integer arithmetic, comparison, list predicates,
structural equality and printing. They are collected once into the read-only
BUILTINS table, which `register` installs into a root environment.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping

from malt import LispValue
from malt.printer import pr_str
from malt.types import is_integer
from malt.types.environment import Environment
from malt.types.errors import MaltDivisionByZero, MaltTypeError
from malt.types.native_fn import Native
from malt.types.nil import Nil
from malt.types.symbol import Symbol


def _integers(name: str, args: list[LispValue]) -> list[int]:
    for i, a in enumerate(args):
        if not is_integer(a):
            raise MaltTypeError(f"{name}: argument {i + 1} isn't an integer: {pr_str(a)}")
    return args


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[LispValue]) -> int:
    a, b = _integers("+", args)
    return a + b


def sub(args: list[LispValue]) -> int:
    a, b = _integers("-", args)
    return a - b


def mul(args: list[LispValue]) -> int:
    a, b = _integers("*", args)
    return a * b


def div(args: list[LispValue]) -> int:
    """Integer division, truncating toward zero."""
    a, b = _integers("/", args)
    if b == 0:
        raise MaltDivisionByZero("/: division by zero")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


# -------------------------------
# Comparison
# -------------------------------
def _comparison(name: str, op: Callable[[int, int], bool]) -> Callable[[list[LispValue]], bool]:
    def compare(args: list[LispValue]) -> bool:
        a, b = _integers(name, args)
        return op(a, b)
    compare.__name__ = f"compare_{name}"
    return compare


lt = _comparison("<", lambda a, b: a < b)
lte = _comparison("<=", lambda a, b: a <= b)
gt = _comparison(">", lambda a, b: a > b)
gte = _comparison(">=", lambda a, b: a >= b)


# -------------------------------
# Equality
# -------------------------------
def is_equal(a: LispValue, b: LispValue) -> bool:
    """Deep equality for malt values; values of different kinds are never equal."""
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    if isinstance(a, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, (int, str, Symbol)):
        return a == b
    # Functions compare by identity, which `a is b` already settled
    return False


def equals(args: list[LispValue]) -> bool:
    a, b = args
    return is_equal(a, b)


# -------------------------------
# Lists
# -------------------------------
def list_builtin(args: list[LispValue]) -> list[LispValue]:
    return list(args)


def is_list(args: list[LispValue]) -> bool:
    return isinstance(args[0], list)


def is_empty(args: list[LispValue]) -> bool:
    xs = args[0]
    if not isinstance(xs, list):
        raise MaltTypeError(f"empty?: argument isn't a list: {pr_str(xs)}")
    return not xs


def count(args: list[LispValue]) -> int:
    xs = args[0]
    if xs is Nil:
        return 0
    if not isinstance(xs, list):
        raise MaltTypeError(f"count: argument isn't a list: {pr_str(xs)}")
    return len(xs)


# -------------------------------
# Output
# -------------------------------
def prn(args: list[LispValue]) -> LispValue:
    """Print the readable form of the argument followed by a newline; returns Nil."""
    print(pr_str(args[0]))
    return Nil


def _natives(*specs: tuple[str, Callable[[list[LispValue]], LispValue], int | None]) -> Mapping[Symbol, Native]:
    return MappingProxyType({Symbol(name): Native(name, fn, arity) for name, fn, arity in specs})


BUILTINS: Mapping[Symbol, Native] = _natives(
    ("+", add, 2),
    ("-", sub, 2),
    ("*", mul, 2),
    ("/", div, 2),
    ("=", equals, 2),
    ("<", lt, 2),
    ("<=", lte, 2),
    (">", gt, 2),
    (">=", gte, 2),
    ("list", list_builtin, None),
    ("list?", is_list, 1),
    ("empty?", is_empty, 1),
    ("count", count, 1),
    ("prn", prn, 1),
)


def register(env: Environment) -> None:
    """Install every builtin function into the given (root) environment."""
    env.update(BUILTINS)
