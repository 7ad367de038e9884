from elysp import SExpression, LispValue
from elysp.errors import ElyspMalformedForm
from elysp.evaluation.arguments import check_arity
from elysp.evaluation.evaluator import evaluate
from elysp.types.environment import Environment
from elysp.types.symbol import Symbol


def define_form(env: Environment, args: SExpression) -> LispValue:
    """
    (define name value)
    Always adds a new binding to the current frame, so a repeated define shadows
    the earlier one. Returns the value.
    """
    check_arity(args, 2, name="define")
    name = args.car
    if not isinstance(name, Symbol):
        raise ElyspMalformedForm(f"malformed define: expected a symbol, got {name!r}")
    value = evaluate(env, args.cdr.car)
    env.add_variable(name, value)
    return value


def set_form(env: Environment, args: SExpression) -> LispValue:
    """
    (set! name value)
    Updates the nearest existing binding in place, or defines `name` in the
    current frame when nothing in the chain binds it. Returns the value.
    """
    check_arity(args, 2, name="set!")
    name = args.car
    if not isinstance(name, Symbol):
        raise ElyspMalformedForm(f"malformed set!: expected a symbol, got {name!r}")
    value = evaluate(env, args.cdr.car)
    env.set_variable(name, value)
    return value
