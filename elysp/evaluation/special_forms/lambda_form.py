"""Special forms: fn and defn.

(fn (params...) body...)        -> a Function closing over the current env
(defn name (params...) body...) -> same, bound to `name` in the current env
"""

from __future__ import annotations

from elysp import SExpression, LispValue
from elysp.errors import ElyspMalformedForm
from elysp.evaluation.arguments import check_arity, NO_MAX
from elysp.types.environment import Environment
from elysp.types.lambda_fn import Function
from elysp.types.pair import is_list, list_tail
from elysp.types.nil import Nil
from elysp.types.symbol import Symbol


def check_params(params: SExpression, form: str) -> None:
    """Every parameter must be a Symbol; rest parameters are not supported."""
    if not is_list(params) or list_tail(params) is not Nil:
        raise ElyspMalformedForm(f"malformed {form}: parameter list must be a proper list")
    for param in params:
        if not isinstance(param, Symbol):
            raise ElyspMalformedForm(f"malformed {form}: parameter must be a symbol, got {param!r}")


def fn_form(env: Environment, args: SExpression) -> LispValue:
    check_arity(args, 2, NO_MAX, name="fn")
    check_params(args.car, "fn")
    return Function(args.car, args.cdr, env)


def defn_form(env: Environment, args: SExpression) -> LispValue:
    check_arity(args, 3, NO_MAX, name="defn")
    if not isinstance(args.car, Symbol):
        raise ElyspMalformedForm(f"malformed defn: expected a symbol, got {args.car!r}")
    fn = fn_form(env, args.cdr)
    env.add_variable(args.car, fn)
    return fn
