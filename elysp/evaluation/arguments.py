"""Argument list validation shared by primitives and the evaluator.

Arguments arrive as unevaluated lists; these helpers check their count and
fetch them by position without evaluating anything.
"""

from __future__ import annotations

from elysp import LispValue, SExpression
from elysp.errors import ElyspArityError, ElyspMalformedForm, ElyspTypeError
from elysp.types.nil import Nil
from elysp.types.pair import Pair, list_length, list_tail
from elysp.types.tags import ValueType, type_of

# Pass as max_args for primitives without an upper bound
NO_MAX = float("inf")


def check_arity(
    args: SExpression, min_args: int, max_args: int | float | None = None, name: str = ""
) -> int:
    """Raise ElyspArityError unless min_args <= len(args) <= max_args.

    max_args defaults to min_args. Returns the argument count. A dotted
    argument list raises ElyspMalformedForm.
    """
    if list_tail(args) is not Nil:
        prefix = f"{name}: " if name else ""
        raise ElyspMalformedForm(f"{prefix}malformed call: argument list must be a proper list")
    if max_args is None:
        max_args = min_args
    n = list_length(args)
    if n < min_args or n > max_args:
        if min_args == max_args:
            wanted = f"{min_args}"
        elif max_args == NO_MAX:
            wanted = f"at least {min_args}"
        else:
            wanted = f"{min_args} to {max_args}"
        prefix = f"{name}: " if name else ""
        raise ElyspArityError(f"{prefix}arity mismatch: expected {wanted} arguments, got {n}")
    return n


def nth_arg(args: SExpression, index: int) -> SExpression:
    """The unevaluated argument at `index`."""
    obj = args
    for _ in range(index):
        if not isinstance(obj, Pair):
            break
        obj = obj.cdr
    if not isinstance(obj, Pair):
        raise ElyspArityError(f"arity mismatch: no argument at position {index}")
    return obj.car


def expect_type(value: LispValue, expected: ValueType, name: str = "") -> LispValue:
    actual = type_of(value)
    if actual is not expected:
        prefix = f"{name}: " if name else ""
        raise ElyspTypeError(
            f"{prefix}expected type {expected} but got {actual}", expected=expected, actual=actual
        )
    return value
