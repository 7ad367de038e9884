"""Type tags for the closed set of runtime value variants."""

from __future__ import annotations

from enum import Enum

from elysp import LispValue
from elysp.errors import ElyspTypeError
from elysp.types.environment import Environment
from elysp.types.lambda_fn import Function, Macro
from elysp.types.native_fn import NativeFunction
from elysp.types.nil import NilType
from elysp.types.pair import Pair
from elysp.types.symbol import Symbol


class ValueType(str, Enum):
    PAIR = "pair"
    SYMBOL = "symbol"
    NIL = "nil"
    ENV = "env"
    NUM = "num"
    NATIVE_FN = "nativefn"
    FN = "fn"
    STRING = "string"
    MACRO = "macro"

    def __str__(self):
        return self.value


def type_of(value: LispValue) -> ValueType:
    match value:
        case NilType():
            return ValueType.NIL
        case Pair():
            return ValueType.PAIR
        case Symbol():
            return ValueType.SYMBOL
        case bool():
            raise ElyspTypeError(f"not an elysp value: {value!r}")
        case int():
            return ValueType.NUM
        case str():
            return ValueType.STRING
        case Environment():
            return ValueType.ENV
        case NativeFunction():
            return ValueType.NATIVE_FN
        case Macro():
            return ValueType.MACRO
        case Function():
            return ValueType.FN
    raise ElyspTypeError(f"not an elysp value: {value!r}")
