"""Special form: defmacro.

(defmacro name (params...) body...) binds a Macro in the current env. When a
form headed by `name` is evaluated, the body runs with the parameters bound to
the *unevaluated* arguments and its last value replaces the form.
"""

from __future__ import annotations

from elysp import SExpression, LispValue
from elysp.errors import ElyspMalformedForm
from elysp.evaluation.arguments import check_arity, NO_MAX
from elysp.evaluation.special_forms.lambda_form import check_params
from elysp.types.environment import Environment
from elysp.types.lambda_fn import Macro
from elysp.types.symbol import Symbol


def defmacro_form(env: Environment, args: SExpression) -> LispValue:
    check_arity(args, 2, NO_MAX, name="defmacro")
    if not isinstance(args.car, Symbol):
        raise ElyspMalformedForm(f"malformed defmacro: expected a symbol, got {args.car!r}")
    name = args.car
    params = args.cdr.car
    check_params(params, "defmacro")

    macro = Macro(params, args.cdr.cdr, env)
    env.add_variable(name, macro)
    return macro
