"""Built-in functions for the elysp root environment.

This module defines equality, arithmetic, list construction, string building,
I/O and the reader debug toggle, plus `register`, which installs them together
with the special forms and the `nil`/`t` constants.

Every primitive receives (env, args) with `args` unevaluated.
"""
from __future__ import annotations

from pathlib import Path

from elysp import LispValue, SExpression
from elysp.debug_utils.pprint import to_string
from elysp.errors import ElyspUserError, ElyspZeroDivisionError
from elysp.evaluation.arguments import check_arity, expect_type
from elysp.evaluation.evaluator import evaluate_list, get_arg
from elysp.evaluation.special_forms import SPECIAL_FORMS
from elysp.types.environment import Environment
from elysp.types.native_fn import NativeFunction
from elysp.types.nil import Nil
from elysp.types.pair import Pair, list_length
from elysp.types.tags import ValueType, type_of


# -------------------------------
# Equality
# -------------------------------
def equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality.

    Tags must match; identical objects are equal; numbers and strings compare
    by value; pairs need equal list length and equal elements. Everything else
    (symbols, nil, environments, functions, macros) is equal only to itself.
    """
    if type_of(a) is not type_of(b):
        return False
    if a is b:
        return True
    match a:
        case int() | str():
            return a == b
        case Pair():
            if list_length(a) != list_length(b):
                return False
            return equal(a.car, b.car) and equal(a.cdr, b.cdr)
    return False


def truth(env: Environment, value: bool) -> LispValue:
    return env.intern("t") if value else Nil


def equals(env: Environment, args: SExpression) -> LispValue:
    """(= a b): t if the two evaluated arguments are structurally equal, else nil."""
    check_arity(args, 2, name="=")
    return truth(env, equal(get_arg(env, args, 0), get_arg(env, args, 1)))


# -------------------------------
# Arithmetic
# -------------------------------
def _operands(env: Environment, args: SExpression, name: str) -> tuple[int, int]:
    check_arity(args, 2, name=name)
    return (
        get_arg(env, args, 0, ValueType.NUM, name=name),
        get_arg(env, args, 1, ValueType.NUM, name=name),
    )


def add(env: Environment, args: SExpression) -> LispValue:
    a, b = _operands(env, args, "+")
    return a + b


def sub(env: Environment, args: SExpression) -> LispValue:
    a, b = _operands(env, args, "-")
    return a - b


def mul(env: Environment, args: SExpression) -> LispValue:
    a, b = _operands(env, args, "*")
    return a * b


def div(env: Environment, args: SExpression) -> LispValue:
    a, b = _operands(env, args, "/")
    if b == 0:
        raise ElyspZeroDivisionError("/: division by zero")
    return a // b


# -------------------------------
# List operations
# -------------------------------
def list_builtin(env: Environment, args: SExpression) -> LispValue:
    return evaluate_list(env, args)


def cons(env: Environment, args: SExpression) -> LispValue:
    check_arity(args, 2, name="cons")
    return Pair(get_arg(env, args, 0), get_arg(env, args, 1))


def _pair_or_nil(env: Environment, args: SExpression, name: str) -> LispValue:
    check_arity(args, 1, name=name)
    value = get_arg(env, args, 0)
    if value is Nil:
        return Nil
    return expect_type(value, ValueType.PAIR, name)


def car(env: Environment, args: SExpression) -> LispValue:
    lst = _pair_or_nil(env, args, "car")
    return Nil if lst is Nil else lst.car


def cdr(env: Environment, args: SExpression) -> LispValue:
    lst = _pair_or_nil(env, args, "cdr")
    return Nil if lst is Nil else lst.cdr


# -------------------------------
# Strings and I/O
# -------------------------------
def string(env: Environment, args: SExpression) -> LispValue:
    """(string a b ...): concatenation of the plain renderings of the arguments."""
    return "".join(to_string(v) for v in evaluate_list(env, args))


def print_builtin(env: Environment, args: SExpression) -> LispValue:
    print(" ".join(to_string(v) for v in evaluate_list(env, args)))
    return Nil


def slurp(env: Environment, args: SExpression) -> LispValue:
    """(slurp "path"): the file's contents as a string."""
    check_arity(args, 1, name="slurp")
    path = get_arg(env, args, 0, ValueType.STRING, name="slurp")
    return Path(path).read_text(encoding="utf-8")


def error(env: Environment, args: SExpression) -> LispValue:
    check_arity(args, 1, name="error")
    raise ElyspUserError(get_arg(env, args, 0, ValueType.STRING, name="error"))


# -------------------------------
# Environment and debugging
# -------------------------------
def env_builtin(env: Environment, args: SExpression) -> LispValue:
    check_arity(args, 0, name="env")
    return env


def reader_debug(env: Environment, args: SExpression) -> LispValue:
    """Toggle echoing of each parsed top-level form."""
    check_arity(args, 0, name="reader/debug")
    sym = env.intern("reader-debug")
    t = env.intern("t")
    if env.find(sym) is t:
        print("reader debugging OFF")
        env.set_variable(sym, Nil)
    else:
        print("reader debugging ON")
        env.set_variable(sym, t)
    return Nil


def reader_debug_enabled(env: Environment) -> bool:
    return env.find(env.intern("reader-debug")) is env.intern("t")


BUILTINS = {
    "=": equals,
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "list": list_builtin,
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "string": string,
    "print": print_builtin,
    "slurp": slurp,
    "error": error,
    "env": env_builtin,
    "reader/debug": reader_debug,
}


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> None:
    """Install constants, special forms and builtins into `env`."""
    env.add_variable(env.intern("nil"), Nil)
    t = env.intern("t")
    env.add_variable(t, t)
    env.add_variable(env.intern("reader-debug"), Nil)
    for table in (SPECIAL_FORMS, BUILTINS):
        for name, fn in table.items():
            env.add_variable(env.intern(name), NativeFunction(name, fn))
