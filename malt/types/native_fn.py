"""Native (host-implemented) function values."""

from __future__ import annotations

from typing import Callable, Optional

from malt import LispValue
from malt.types.errors import MaltArityError


class Native:
    """A builtin function implemented in Python.

    `arity` is the exact number of arguments the function accepts, or None
    when it takes any number. The count is checked before `fn` runs, so `fn`
    can index its argument list freely.
    """

    __slots__ = ("name", "fn", "arity")

    def __init__(
        self,
        name: str,
        fn: Callable[[list[LispValue]], LispValue],
        arity: Optional[int] = None,
    ):
        self.name = name
        self.fn = fn
        self.arity = arity

    def __call__(self, args: list[LispValue]) -> LispValue:
        if self.arity is not None and len(args) != self.arity:
            raise MaltArityError(
                f"{self.name} takes {self.arity} args, got {len(args)}"
            )
        return self.fn(args)

    def __repr__(self) -> str:
        return f"<Native {self.name}>"
