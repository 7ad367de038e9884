"""Runtime environment for elysp.

An Environment is a frame holding an association list of bindings
`((sym . value) ...)` plus an `up` link to the enclosing frame (Nil at the
root). Keys are compared by identity, so every frame in a chain shares one
SymbolTable, which children inherit from their parent.
"""

from __future__ import annotations

from typing import Iterator

from elysp import LispValue
from elysp.errors import ElyspArityError, ElyspUnboundSymbol
from elysp.types.nil import Nil
from elysp.types.pair import Pair, acons, list_length
from elysp.types.symbol import Symbol, SymbolTable


class _NotFound:
    def __repr__(self):
        return "<not found>"


# Returned by find() for unbound symbols; distinct from a binding to Nil.
NOT_FOUND = _NotFound()


class Environment:
    """A lexical scope frame: association list of bindings plus parent link."""

    __slots__ = ("vars", "up", "symbols")

    def __init__(
        self,
        vars: LispValue = Nil,
        up: Environment | LispValue = Nil,
        symbols: SymbolTable | None = None,
    ):
        self.vars: LispValue = vars
        self.up: Environment | LispValue = up
        if symbols is None:
            symbols = up.symbols if isinstance(up, Environment) else SymbolTable()
        self.symbols: SymbolTable = symbols

    def _frames(self) -> Iterator[Environment]:
        env = self
        while isinstance(env, Environment):
            yield env
            env = env.up

    def _binding(self, symbol: Symbol) -> Pair | None:
        """Find the nearest (sym . value) cell for `symbol` in the chain."""
        for env in self._frames():
            obj = env.vars
            while isinstance(obj, Pair):
                bind = obj.car
                if isinstance(bind, Pair) and bind.car is symbol:
                    return bind
                obj = obj.cdr
        return None

    def add_variable(self, symbol: Symbol, value: LispValue) -> None:
        """Prepend a binding to this frame. Earlier bindings of the name are shadowed."""
        self.vars = acons(symbol, value, self.vars)

    def set_variable(self, symbol: Symbol, value: LispValue) -> None:
        """Mutate the nearest existing binding of `symbol` in place.

        If no frame in the chain binds it, the binding is added to this frame.
        """
        bind = self._binding(symbol)
        if bind is None:
            self.add_variable(symbol, value)
        else:
            bind.cdr = value

    def find(self, symbol: Symbol) -> LispValue:
        """Value bound to `symbol`, or NOT_FOUND."""
        bind = self._binding(symbol)
        if bind is None:
            return NOT_FOUND
        return bind.cdr

    def lookup(self, symbol: Symbol) -> LispValue:
        """Like find(), but raises ElyspUnboundSymbol for unbound symbols."""
        value = self.find(symbol)
        if value is NOT_FOUND:
            raise ElyspUnboundSymbol(f"unknown symbol: {symbol}")
        return value

    def intern(self, name: str) -> Symbol:
        return self.symbols.intern(name)

    def bindings(self) -> Iterator[tuple[Symbol, LispValue]]:
        """Yield this frame's (symbol, value) pairs, most recent first."""
        obj = self.vars
        while isinstance(obj, Pair):
            bind = obj.car
            if isinstance(bind, Pair):
                yield bind.car, bind.cdr
            obj = obj.cdr

    def __repr__(self) -> str:
        from elysp.debug_utils.pprint import to_string
        return f"<Environment {to_string(self)}>"


def push_env(parent: Environment, params: LispValue, args: LispValue) -> Environment:
    """Create a child of `parent` binding each parameter symbol to the matching argument."""
    if list_length(params) != list_length(args):
        raise ElyspArityError(
            f"env: mismatched number of vars and values: "
            f"expected {list_length(params)}, got {list_length(args)}"
        )
    env = Environment(Nil, parent)
    param, arg = params, args
    while isinstance(param, Pair) and isinstance(arg, Pair):
        env.add_variable(param.car, arg.car)
        param, arg = param.cdr, arg.cdr
    return env
