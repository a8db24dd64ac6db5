"""Core evaluator and trampoline for the malt interpreter.

Implements self-evaluation, symbol lookup, special-form dispatch and
function application. Tail positions (the body of let*, the chosen branch of
if, the last form of do, and closure bodies) come back as TailCall objects,
and `evaluate` loops on them instead of recursing, so tail-recursive programs
run in constant Python stack.
"""

from __future__ import annotations

import logging

from malt import SExpression, LispValue
from malt.types.environment import Environment
from malt.types.errors import MaltError
from malt.types.symbol import Symbol
from malt.types.tail_call import TailCall
from malt.evaluation.apply import apply
from malt.evaluation.special_forms import SPECIAL_FORMS

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """
    Trampoline evaluator: evaluate `expr` in `env` and return its value.

    Raises a MaltError subclass when evaluation fails.
    """
    while True:
        result = evaluate0(expr, env)
        if not isinstance(result, TailCall):
            return result
        expr, env = result.expr, result.env


def evaluate0(expr: SExpression, env: Environment) -> LispValue | TailCall:
    """
    Single evaluation step. Returns either a final value or the TailCall
    holding the next (expr, env) pair.
    """
    match expr:
        case Symbol():
            return env.lookup(expr)

        case []:
            # The empty list is data, not a call
            return expr

        case [Symbol() as head, *args] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](args, env, evaluate)

        case [head, *args]:
            # Head first, then arguments, strictly left to right
            fn = evaluate(head, env)
            values = [evaluate(arg, env) for arg in args]
            try:
                return apply(fn, values)
            except MaltError:
                logger.debug("application of %r failed", head, exc_info=True)
                raise

    # --- Atoms (Nil, booleans, integers, strings, functions) return as-is ---
    return expr
