from malt import SExpression
from malt.types.environment import Environment


class TailCall:
    """The next (expr, env) pair for the trampoline to run."""

    __slots__ = ("expr", "env")

    def __init__(self, expr: SExpression, env: Environment):
        self.expr = expr
        self.env = env

    def __repr__(self):
        return f"TailCall({self.expr!r})"
