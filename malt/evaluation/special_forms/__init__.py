"""Registry of special forms for the malt evaluator.

Maps Symbols to handler functions that implement non-standard evaluation
rules. The evaluator consults this table, against the raw unevaluated list,
before ordinary function application.

Every handler has the signature ``handler(args, env, evaluate_fn)`` and returns
either a final value or a TailCall for the trampoline.
"""

from types import MappingProxyType

from malt.types.symbol import Symbol
from malt.evaluation.special_forms.define_form import define_form
from malt.evaluation.special_forms.let_form import let_form
from malt.evaluation.special_forms.if_form import if_form
from malt.evaluation.special_forms.do_form import do_form
from malt.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = MappingProxyType({
    Symbol("def!"): define_form,
    Symbol("let*"): let_form,
    Symbol("if"): if_form,
    Symbol("do"): do_form,
    Symbol("fn*"): lambda_form,
})
