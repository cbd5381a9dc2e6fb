"""Registry of special forms for the Kappa evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application.

Every handler has the signature `(tail, env, evaluate_fn, debug)` where `tail` is
the form without its head symbol. A handler either returns the final value or
a TailCall naming the expression and environment to continue with.
"""

from kappa.types import Symbol
from kappa.evaluation.special_forms.define_form import define_form
from kappa.evaluation.special_forms.let_form import let_form
from kappa.evaluation.special_forms.do_form import do_form
from kappa.evaluation.special_forms.if_form import if_form
from kappa.evaluation.special_forms.fn_form import fn_form

SPECIAL_FORMS = {
    Symbol("def!"): define_form,
    Symbol("let*"): let_form,
    Symbol("do"): do_form,
    Symbol("if"): if_form,
    Symbol("fn*"): fn_form,
}
