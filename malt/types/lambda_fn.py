"""Closure representation and argument binding for malt."""

from __future__ import annotations

from io import StringIO
from typing import Sequence

from malt import SExpression, LispValue
from malt.types.environment import Environment
from malt.types.symbol import Symbol
from malt.types.errors import MaltArityError


class Closure:
    """A user function: formal parameters, one body form, and its defining env."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: Sequence[Symbol], body: SExpression, env: Environment):
        self.params: tuple[Symbol, ...] = tuple(params)
        self.body: SExpression = body
        # Captured by reference, never copied: later defines in the defining
        # scope (e.g. a recursive def!) are visible to the body.
        self.env: Environment = env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(fn* (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(") ")
            buffer.write(repr(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Closure {self}>"

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values positionally to this closure's
        parameters and return the new Environment for evaluating the body.
        """
        if len(args) != len(self.params):
            raise MaltArityError(
                f"function takes {len(self.params)} args, got {len(args)}"
            )
        new_env = Environment(outer=self.env)
        for param, arg in zip(self.params, args):
            new_env.define(param, arg)
        return new_env
