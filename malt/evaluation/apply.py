"""Application engine for malt.

Keeps function-call semantics in one place:
- Natives are called directly and their result is final.
- Closures bind their arguments in a fresh frame over the captured
  environment and hand the body back to the trampoline as a TailCall.
"""

from __future__ import annotations

from malt import LispValue
from malt.printer import pr_str
from malt.types.native_fn import Native
from malt.types.lambda_fn import Closure
from malt.types.errors import MaltNotCallable
from malt.types.tail_call import TailCall


def apply(head: LispValue, args: list[LispValue]) -> LispValue | TailCall:
    """Apply either a Native or a Closure to already-evaluated arguments.

    Raises MaltNotCallable when `head` is not a function, and MaltArityError
    when the argument count does not match.
    """
    match head:
        case Native():
            return head(args)
        case Closure():
            return TailCall(head.body, head.extend_env(args))
    raise MaltNotCallable(f"{pr_str(head)} is not a function")
