"""Interpreted closures: Function and Macro."""

from __future__ import annotations

from elysp import SExpression
from elysp.types.environment import Environment


class Lambda:
    """Parameters, body forms and the environment captured at definition.

    Function and Macro share this shape; they differ only in how the
    evaluator treats them (see elysp.evaluation).
    """

    __slots__ = ("params", "body", "env")

    def __init__(self, params: SExpression, body: SExpression, env: Environment):
        self.params: SExpression = params
        self.body: SExpression = body
        # Captured by reference, never copied
        self.env: Environment = env


class Function(Lambda):
    __slots__ = ()

    def __repr__(self) -> str:
        return "<function>"


class Macro(Lambda):
    __slots__ = ()

    def __repr__(self) -> str:
        return "<macro>"
