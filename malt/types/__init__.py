"""Value model for malt: the closed set of runtime values and their helpers."""

from malt.types.nil import Nil, NilType
from malt.types.symbol import Symbol
from malt.types.native_fn import Native
from malt.types.lambda_fn import Closure
from malt.types.environment import Environment
from malt.types.tail_call import TailCall

def is_integer(value) -> bool:
    """True for Integer values. Python's bool is an int subclass, so exclude it."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_truthy(value) -> bool:
    """Only Nil and false are falsy; 0, "" and () are truthy."""
    return value is not Nil and value is not False

__all__ = [
    "Nil",
    "NilType",
    "Symbol",
    "Native",
    "Closure",
    "Environment",
    "TailCall",
    "is_integer",
    "is_truthy",
]
