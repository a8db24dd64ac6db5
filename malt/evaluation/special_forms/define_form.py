from malt import EvaluatorFn
from malt import SExpression, LispValue
from malt.types.errors import MaltArityError, MaltMalformedSpecialForm
from malt.types.symbol import Symbol
from malt.types.environment import Environment


def define_form(
    args: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def! name expr)
    Evaluates expr in the current env, binds it there and returns the value.
    """
    if len(args) != 2:
        raise MaltArityError(f"def! takes 2 args, got {len(args)}")

    name, val_expr = args
    if not isinstance(name, Symbol):
        raise MaltMalformedSpecialForm("def!: first arg isn't a symbol")
    value = evaluate_fn(val_expr, env)  # not a tail position
    env.define(name, value)
    return value
