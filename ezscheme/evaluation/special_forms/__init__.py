"""Registry of special forms.

Maps Symbols to handler functions that implement non-standard evaluation
rules. The evaluator consults this table before treating a list as a
procedure application. Handlers receive the operand forms as a Python
list, the current environment and the evaluator.
"""

from ezscheme.types.symbol import Symbol
from ezscheme.evaluation.special_forms.quote_form import quote_form
from ezscheme.evaluation.special_forms.set_form import set_form
from ezscheme.evaluation.special_forms.define_form import define_form
from ezscheme.evaluation.special_forms.if_form import if_form
from ezscheme.evaluation.special_forms.cond_form import cond_form
from ezscheme.evaluation.special_forms.let_form import let_form
from ezscheme.evaluation.special_forms.lambda_form import lambda_form
from ezscheme.evaluation.special_forms.begin_form import begin_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("set!"): set_form,
    Symbol("define"): define_form,
    Symbol("if"): if_form,
    Symbol("cond"): cond_form,
    Symbol("let"): let_form,
    Symbol("lambda"): lambda_form,
    Symbol("begin"): begin_form,
}
