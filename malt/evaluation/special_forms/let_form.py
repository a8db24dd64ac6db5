from malt import EvaluatorFn
from malt import SExpression
from malt.types.errors import MaltArityError, MaltMalformedSpecialForm
from malt.types.symbol import Symbol
from malt.types.environment import Environment
from malt.types.tail_call import TailCall


def let_form(
    args: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    """
    (let* (name1 expr1 name2 expr2 ...) body)

    Every expr is evaluated in the frame being built, so later bindings can
    refer to earlier ones. The body runs in that frame as a tail call.
    """
    if len(args) != 2:
        raise MaltArityError(f"let* takes 2 args, got {len(args)}")

    bindings, body = args
    if not isinstance(bindings, list):
        raise MaltMalformedSpecialForm("let*: first arg isn't a list")
    if len(bindings) % 2 != 0:
        raise MaltMalformedSpecialForm(
            "let*: first arg doesn't have an even number of items"
        )

    child = env.child()
    for i in range(0, len(bindings), 2):
        name = bindings[i]
        if not isinstance(name, Symbol):
            raise MaltMalformedSpecialForm(f"let*: binding {i} isn't a symbol")
        child.define(name, evaluate_fn(bindings[i + 1], child))

    return TailCall(body, child)
