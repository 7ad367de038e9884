from __future__ import annotations

from elysp.builtin.env_builtin import register
from elysp.types.environment import Environment
from elysp.types.symbol import SymbolTable


def make_root_env(symbols: SymbolTable | None = None) -> Environment:
    """A root Environment holding `nil`, `t` and the primitive library (no prelude)."""
    env = Environment(symbols=symbols)
    register(env)
    return env
