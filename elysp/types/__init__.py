from elysp.types.nil import Nil, NilType
from elysp.types.symbol import Symbol, SymbolTable
from elysp.types.pair import Pair, cons, acons, make_list, list_length, list_tail, is_list
from elysp.types.environment import Environment, NOT_FOUND, push_env
from elysp.types.lambda_fn import Lambda, Function, Macro
from elysp.types.native_fn import NativeFunction
from elysp.types.tags import ValueType, type_of

__all__ = [
    "Nil",
    "NilType",
    "Symbol",
    "SymbolTable",
    "Pair",
    "cons",
    "acons",
    "make_list",
    "list_length",
    "list_tail",
    "is_list",
    "Environment",
    "NOT_FOUND",
    "push_env",
    "Lambda",
    "Function",
    "Macro",
    "NativeFunction",
    "ValueType",
    "type_of",
]
