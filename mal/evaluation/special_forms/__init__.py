"""Registry of special forms for the mal evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
function application. Handlers receive the whole form, the current environment
and the evaluator.
"""

from mal.types.symbol import Symbol
from mal.evaluation.special_forms.define_form import define_form
from mal.evaluation.special_forms.let_form import let_form
from mal.evaluation.special_forms.do_form import do_form
from mal.evaluation.special_forms.fn_form import fn_form
from mal.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    Symbol("def!"): define_form,
    Symbol("let*"): let_form,
    Symbol("do"): do_form,
    Symbol("fn*"): fn_form,
    Symbol("if"): if_form,
}

# Forms that are also recognized when written with vector brackets.
VECTOR_SPECIAL_FORMS = frozenset({Symbol("let*")})
