# Core type aliases for malt's data model.
# Runtime values are plain Python types where one fits (bool, int, str, list)
# plus a few small classes for the rest (Nil, Symbol, Native, Closure).
#
# Naming guidance:
# - SExpression: use in reader/parser code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (code is data, so this is the same thing)
SExpression = LispValue

# Evaluator function type, handed to special forms for non-tail evaluation
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
