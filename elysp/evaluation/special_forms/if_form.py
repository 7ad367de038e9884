from elysp import SExpression, LispValue
from elysp.evaluation.arguments import check_arity
from elysp.evaluation.evaluator import evaluate
from elysp.types.environment import Environment
from elysp.types.nil import Nil


def if_form(env: Environment, args: SExpression) -> LispValue:
    """(if cond then [else])

    Only the `t` symbol itself selects the then-branch; every other value,
    Nil included, is false. A missing else-branch yields Nil.
    """
    n = check_arity(args, 2, 3, name="if")

    cond = evaluate(env, args.car)
    if cond is env.intern("t"):
        return evaluate(env, args.cdr.car)
    elif n > 2:
        return evaluate(env, args.cdr.cdr.car)
    else:
        return Nil
