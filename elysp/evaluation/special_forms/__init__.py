"""Registry of special forms for the elysp evaluator.

Special forms are ordinary NativeFunctions in the root environment: they
receive their arguments unevaluated and control evaluation themselves. This
table maps their names to the Python implementations.
"""

from elysp.evaluation.special_forms.lambda_form import fn_form, defn_form
from elysp.evaluation.special_forms.define_form import define_form, set_form
from elysp.evaluation.special_forms.defmacro_form import defmacro_form
from elysp.evaluation.special_forms.if_form import if_form
from elysp.evaluation.special_forms.quote_forms import quote_form, unquote_form
from elysp.evaluation.special_forms.macroexpand_forms import macex_form
from elysp.evaluation.special_forms.import_form import import_form

SPECIAL_FORMS = {
    "fn": fn_form,
    "defn": defn_form,
    "define": define_form,
    "set!": set_form,
    "defmacro": defmacro_form,
    "if": if_form,
    "quote": quote_form,
    "unquote": unquote_form,
    "macex": macex_form,
    "import": import_form,
}
