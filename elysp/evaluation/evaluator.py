"""Core evaluator for the elysp interpreter.

Implements symbol resolution, head-position macro expansion and application
of native functions, closures and lists-as-lookup-tables. Evaluation is plain
recursion: deeply nested calls consume the host call stack.
"""

from __future__ import annotations

from elysp import SExpression, LispValue
from elysp.debug_utils.pprint import to_string
from elysp.errors import ElyspNotCallable, ElyspTypeError
from elysp.evaluation.arguments import check_arity, expect_type, nth_arg
from elysp.types.environment import Environment, NOT_FOUND, push_env
from elysp.types.lambda_fn import Function, Lambda, Macro
from elysp.types.native_fn import NativeFunction
from elysp.types.nil import Nil, NilType
from elysp.types.pair import Pair
from elysp.types.symbol import Symbol
from elysp.types.tags import ValueType


def evaluate(env: Environment, expr: SExpression) -> LispValue:
    match expr:
        case Symbol():
            return env.lookup(expr)
        case Pair():
            expanded = macro_expand(env, expr)
            if expanded is not expr:
                return evaluate(env, expanded)
            fn = evaluate(env, expr.car)
            return apply(env, fn, expr.cdr)
        case NilType() | int() | str() | Environment() | NativeFunction() | Lambda():
            # Atoms return as-is
            return expr
    raise ElyspTypeError(f"cannot evaluate {expr!r}")


def evaluate_list(env: Environment, exprs: SExpression) -> LispValue:
    """Evaluate each element left to right into a fresh list."""
    head: Pair | None = None
    tail: Pair | None = None
    obj = exprs
    while isinstance(obj, Pair):
        cell = Pair(evaluate(env, obj.car), Nil)
        if tail is None:
            head = tail = cell
        else:
            tail.cdr = cell
            tail = cell
        obj = obj.cdr
    return Nil if head is None else head


def evaluate_body(env: Environment, body: SExpression) -> LispValue:
    """Evaluate body forms in order; the last value is the result (Nil if empty)."""
    result: LispValue = Nil
    obj = body
    while isinstance(obj, Pair):
        result = evaluate(env, obj.car)
        obj = obj.cdr
    return result


def macro_expand(env: Environment, form: SExpression) -> SExpression:
    """Expand `form` once if its head names a macro.

    The macro's parameters are bound to the unevaluated arguments in a child
    of `env`, and its body is run there. The expansion is returned without
    being evaluated. Non-macro forms are returned unchanged (the same object).
    """
    if not isinstance(form, Pair) or not isinstance(form.car, Symbol):
        return form
    macro = env.find(form.car)
    if macro is NOT_FOUND or not isinstance(macro, Macro):
        return form
    call_env = push_env(env, macro.params, form.cdr)
    return evaluate_body(call_env, macro.body)


def apply(env: Environment, fn: LispValue, args: SExpression) -> LispValue:
    """Apply `fn` to the unevaluated argument list `args` from `env`."""
    match fn:
        case NativeFunction():
            # Primitives decide for themselves what to evaluate
            return fn(env, args)
        case Function():
            values = evaluate_list(env, args)
            return evaluate_body(push_env(fn.env, fn.params, values), fn.body)
        case Pair():
            check_arity(args, 1, name="list index")
            index = get_arg(env, args, 0, ValueType.NUM)
            for i, item in enumerate(fn):
                if i == index:
                    return item
            return Nil
    raise ElyspNotCallable(f"cannot apply {to_string(fn)}")


def get_arg(
    env: Environment, args: SExpression, index: int, expected: ValueType | None = None, name: str = ""
) -> LispValue:
    """Evaluate the argument at `index`, optionally checking its type tag."""
    value = evaluate(env, nth_arg(args, index))
    if expected is not None:
        expect_type(value, expected, name)
    return value
