# Core type aliases for elysp's data model.
# Runtime values are a closed union: Nil, Symbol, Pair, int, str, Environment,
# NativeFunction, Function and Macro (see elysp.types.tags for the tags).
#
# Naming guidance:
# - SExpression: Use in reader/macro code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; code and data share one representation.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Primitive signature: (calling environment, unevaluated argument list) -> value
PrimitiveFn = Callable[..., LispValue]
