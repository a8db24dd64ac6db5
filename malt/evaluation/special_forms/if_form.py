from malt import EvaluatorFn
from malt import SExpression
from malt.types import is_truthy
from malt.types.errors import MaltArityError
from malt.types.nil import Nil
from malt.types.environment import Environment
from malt.types.tail_call import TailCall


def if_form(
    args: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    if len(args) not in (2, 3):
        raise MaltArityError(f"if takes 2 or 3 args, got {len(args)}")

    cond = evaluate_fn(args[0], env)

    if is_truthy(cond):
        return TailCall(args[1], env)
    elif len(args) == 3:
        return TailCall(args[2], env)
    else:
        return TailCall(Nil, env)
