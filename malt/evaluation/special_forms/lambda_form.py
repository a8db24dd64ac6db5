from malt import EvaluatorFn
from malt import SExpression, LispValue
from malt.types.errors import MaltArityError, MaltMalformedSpecialForm
from malt.types.lambda_fn import Closure
from malt.types.environment import Environment
from malt.types.symbol import Symbol


def lambda_form(
    args: list[SExpression],
    env: Environment,
    _: EvaluatorFn,
) -> LispValue:
    """(fn* (params...) body) -> a Closure over the current env."""
    if len(args) != 2:
        raise MaltArityError(f"fn* takes 2 args, got {len(args)}")

    params, body = args
    if not isinstance(params, list):
        raise MaltMalformedSpecialForm("fn*: first arg isn't a list")

    seen: set[Symbol] = set()
    for i, param in enumerate(params):
        if not isinstance(param, Symbol):
            raise MaltMalformedSpecialForm(f"fn*: parameter {i} isn't a symbol")
        if param in seen:
            raise MaltMalformedSpecialForm(f"fn*: duplicate parameter {param}")
        seen.add(param)

    return Closure(params, body, env)
