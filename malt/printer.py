"""Value-to-text formatting for malt.

The readable form of every non-function value reads back to an equal value.
Functions print as an opaque placeholder.
"""

from io import StringIO

from malt import LispValue
from malt.types.nil import Nil
from malt.types.symbol import Symbol
from malt.types.native_fn import Native
from malt.types.lambda_fn import Closure

FUNCTION_PLACEHOLDER = "#<function>"

_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n"}


def escape_string(s: str) -> str:
    return '"' + "".join(_ESCAPES.get(c, c) for c in s) + '"'


def _write(value: LispValue, buffer: StringIO, print_readably: bool) -> None:
    match value:
        case bool():
            buffer.write("true" if value else "false")
        case int():
            buffer.write(str(value))
        case str():
            buffer.write(escape_string(value) if print_readably else value)
        case Symbol():
            buffer.write(value.id)
        case list():
            buffer.write("(")
            for i, item in enumerate(value):
                if i:
                    buffer.write(" ")
                _write(item, buffer, print_readably)
            buffer.write(")")
        case Native() | Closure():
            buffer.write(FUNCTION_PLACEHOLDER)
        case _ if value is Nil:
            buffer.write("nil")
        case _:
            raise TypeError(f"not a malt value: {value!r}")


def pr_str(value: LispValue, print_readably: bool = True) -> str:
    """Format `value` as malt source text."""
    with StringIO() as buffer:
        _write(value, buffer, print_readably)
        return buffer.getvalue()
