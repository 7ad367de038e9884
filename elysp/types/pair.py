"""Mutable cons cells and list helpers.

A list is either Nil or a Pair whose cdr is a list; a "dotted" list ends in
any other value. Pairs are shared by reference: mutating car/cdr through one
alias is visible through all of them.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from elysp import LispValue
from elysp.types.nil import Nil


class Pair:
    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue = Nil):
        self.car = car
        self.cdr = cdr

    def __iter__(self) -> Iterator[LispValue]:
        """Yield each car of the proper part of the list (a dotted tail is skipped)."""
        obj = self
        while isinstance(obj, Pair):
            yield obj.car
            obj = obj.cdr

    def __repr__(self) -> str:
        from elysp.debug_utils.pprint import to_string
        return to_string(self)


def cons(car: LispValue, cdr: LispValue) -> Pair:
    return Pair(car, cdr)


def acons(key: LispValue, value: LispValue, alist: LispValue) -> Pair:
    """Prepend the binding (key . value) to an association list."""
    return Pair(Pair(key, value), alist)


def make_list(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a fresh list from a Python iterable, optionally ending in a dotted tail."""
    head = tail
    for item in reversed(list(items)):
        head = Pair(item, head)
    return head


def list_length(lst: LispValue) -> int:
    """Number of elements; a dotted tail counts as one extra element."""
    if not isinstance(lst, Pair):
        return 0
    n = 0
    obj = lst
    while isinstance(obj, Pair):
        n += 1
        obj = obj.cdr
    if obj is not Nil:
        n += 1
    return n


def list_tail(lst: LispValue) -> LispValue:
    """The value terminating a list: Nil for proper lists, the dotted tail otherwise."""
    obj = lst
    while isinstance(obj, Pair):
        obj = obj.cdr
    return obj


def is_list(value: LispValue) -> bool:
    return value is Nil or isinstance(value, Pair)
