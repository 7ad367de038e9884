"""Textual renderings of elysp values.

to_string: plain text, used by `print`, `string` and error messages.
colorize:  ANSI-colored text, used by the interactive loop and reader debug echo.

Both show at most MAX_ELEMENTS list elements before an ellipsis, render dotted
tails with " . ", and render an Environment as its bindings list (the parent
link is never shown).
"""

from __future__ import annotations

from io import StringIO

from elysp import LispValue
from elysp.types.environment import Environment
from elysp.types.lambda_fn import Function, Macro
from elysp.types.native_fn import NativeFunction
from elysp.types.nil import NilType
from elysp.types.pair import Pair
from elysp.types.symbol import Symbol

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_SYMBOL = "\033[96m"
COLOR_STRING = "\033[96m"
COLOR_NUMBER = "\033[93m"

MAX_ELEMENTS = 6
ELLIPSIS = "..."


def _paint(text: str, color: str, colors: bool) -> str:
    return f"{color}{text}{RESET}" if colors else text


def _write_list(obj: LispValue, buffer: StringIO, colors: bool) -> None:
    buffer.write("(")
    left = MAX_ELEMENTS
    while isinstance(obj, Pair):
        if left == 0:
            buffer.write(ELLIPSIS)
            break
        _write(obj.car, buffer, colors)
        if isinstance(obj.cdr, NilType):
            break
        if not isinstance(obj.cdr, Pair):
            buffer.write(" . ")
            _write(obj.cdr, buffer, colors)
            break
        buffer.write(" ")
        obj = obj.cdr
        left -= 1
    buffer.write(")")


def _write(obj: LispValue, buffer: StringIO, colors: bool) -> None:
    match obj:
        case Environment():
            _write_list(obj.vars, buffer, colors)
        case Pair():
            _write_list(obj, buffer, colors)
        case Symbol():
            buffer.write(_paint(obj.name, COLOR_SYMBOL, colors))
        case NilType():
            buffer.write("nil")
        case int():
            buffer.write(_paint(str(obj), COLOR_NUMBER, colors))
        case str():
            if colors:
                buffer.write(_paint(f'"{obj}"', COLOR_STRING, colors))
            else:
                buffer.write(obj)
        case NativeFunction():
            buffer.write(f"<native function {obj.name}>")
        case Macro():
            buffer.write("<macro>")
        case Function():
            buffer.write("<function>")
        case _:
            buffer.write(repr(obj))


def to_string(obj: LispValue) -> str:
    with StringIO() as buffer:
        _write(obj, buffer, colors=False)
        return buffer.getvalue()


def colorize(obj: LispValue) -> str:
    with StringIO() as buffer:
        _write(obj, buffer, colors=True)
        return buffer.getvalue()


if __name__ == "__main__":
    from elysp.types.pair import make_list
    from elysp.types.symbol import SymbolTable

    symbols = SymbolTable()
    sample = make_list([symbols.intern("quote"), make_list([1, "two", symbols.intern("three")])])
    print(to_string(sample))
    print(colorize(sample))
    print(colorize(make_list(range(10))))
