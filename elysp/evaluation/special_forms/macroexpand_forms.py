"""Special form exposing the macro expander to Lisp code.

(macex form): expand the head macro of `form` once and return the expansion
without evaluating it. The argument itself is not evaluated, so

    (defmacro double (x) '(quote (,x ,x)))
    (macex (double 5))   ; => (quote (5 5))
"""

from elysp import SExpression
from elysp.evaluation.arguments import check_arity
from elysp.evaluation.evaluator import macro_expand
from elysp.types.environment import Environment


def macex_form(env: Environment, args: SExpression) -> SExpression:
    check_arity(args, 1, name="macex")
    return macro_expand(env, args.car)
