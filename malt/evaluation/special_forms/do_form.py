from __future__ import annotations

from malt import EvaluatorFn
from malt import SExpression, LispValue
from malt.types.nil import Nil
from malt.types.environment import Environment
from malt.types.tail_call import TailCall


def do_form(
    args: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    # (do) with no forms is nil
    if not args:
        return Nil
    for e in args[:-1]:
        evaluate_fn(e, env)
    return TailCall(args[-1], env)
