"""quote / unquote.

`quote` doubles as quasiquote: any (unquote x) nested inside the quoted
structure is evaluated and its value takes the place of the unquote form.
Everything else is copied without evaluation.
"""

from elysp import SExpression, LispValue
from elysp.errors import ElyspMalformedForm
from elysp.evaluation.arguments import check_arity
from elysp.evaluation.evaluator import evaluate
from elysp.types.environment import Environment
from elysp.types.nil import Nil
from elysp.types.pair import Pair


def evaluate_unquotes(env: Environment, expr: SExpression) -> SExpression:
    if not isinstance(expr, Pair):
        return expr
    if expr.car is env.intern("unquote"):
        return evaluate(env, expr)

    head: Pair | None = None
    tail: Pair | None = None
    obj = expr
    while isinstance(obj, Pair):
        cell = Pair(evaluate_unquotes(env, obj.car), Nil)
        if tail is None:
            head = tail = cell
        else:
            tail.cdr = cell
            tail = cell
        obj = obj.cdr
    # Dotted tail
    tail.cdr = evaluate_unquotes(env, obj)
    return head


def quote_form(env: Environment, args: SExpression) -> LispValue:
    if not isinstance(args, Pair):
        raise ElyspMalformedForm("malformed quote")
    return evaluate_unquotes(env, args.car)


def unquote_form(env: Environment, args: SExpression) -> LispValue:
    check_arity(args, 1, name="unquote")
    return evaluate(env, args.car)
