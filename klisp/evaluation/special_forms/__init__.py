"""Registry of special forms for the klisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
function application. Handlers receive the unevaluated operands, the current
environment and the evaluator to call back into.
"""

from klisp.types.symbol import Symbol
from klisp.evaluation.special_forms.quote_forms import quote_form
from klisp.evaluation.special_forms.define_form import define_form
from klisp.evaluation.special_forms.lambda_form import lambda_form
from klisp.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
    Symbol("if"): if_form,
}
