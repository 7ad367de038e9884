from __future__ import annotations

from elysp import PrimitiveFn, LispValue


class NativeFunction:
    """A primitive implemented in Python.

    Called with the calling Environment and the *unevaluated* argument list;
    the primitive decides what to evaluate.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFn):
        self.name = name
        self.fn = fn

    def __call__(self, env, args) -> LispValue:
        return self.fn(env, args)

    def __repr__(self) -> str:
        return f"<native function {self.name}>"
