"""
  elysp Reader

- Single pass, character-addressed recursive descent (no token stage)
- Produces the same Pair/Symbol/int/str graph the evaluator consumes:

    - () -> Nil
    - (a b . c) -> Pair chain with a dotted tail
    - [a b] -> (list a b)
    - 'x -> (quote x), ,x -> (unquote x)
    - "text" -> str (no escape processing)
    - 123 -> int
    - other runs of [a-z-+=/*!?] -> interned Symbol
    - # ... end of line -> comment
    - #- form -> the next form is read and discarded
"""

from __future__ import annotations

import logging
import re
import sys
from typing import Iterator

from elysp import SExpression
from elysp.errors import ElyspStackOverflow, ElyspSyntaxError
from elysp.types.nil import Nil
from elysp.types.pair import Pair, make_list
from elysp.types.symbol import Symbol, SymbolTable

logger = logging.getLogger(__name__)

WHITESPACE = " \t\n\r"
NUMBER_RE = re.compile(r"[0-9]+")
SYMBOL_RE = re.compile(r"[a-z\-+=/*!?]*")
SNIPPET_LENGTH = 10


class Reader:
    def __init__(self, source: str, symbols: SymbolTable):
        self.source = source
        self.pos = 0
        self.symbols = symbols

    # --- character access ---
    def peek(self, offset: int = 0) -> str:
        i = self.pos + offset
        return self.source[i] if i < len(self.source) else ""

    def at_eof(self) -> bool:
        return self.pos >= len(self.source)

    def advance(self) -> str:
        c = self.peek()
        if c:
            self.pos += 1
        return c

    def snippet(self) -> str:
        return self.source[self.pos:self.pos + SNIPPET_LENGTH]

    def error(self, message: str, **kwargs) -> ElyspSyntaxError:
        return ElyspSyntaxError(message, snippet=self.snippet(), **kwargs)

    def consume(self, c: str) -> str:
        if self.peek() == c:
            return self.advance()
        actual = self.peek() or "end of input"
        raise self.error(
            f"syntax error: expected {c!r} but got {actual!r}", expected=c, actual=actual
        )

    # --- entry points ---
    def read(self) -> SExpression | None:
        """Read the next form, or None at end of input."""
        try:
            return self.read_next()
        except ElyspSyntaxError as e:
            print(f"error at '{e.snippet or self.snippet()}...'", file=sys.stderr)
            raise
        except RecursionError as e:
            raise ElyspStackOverflow("stack overflow: form nested too deeply") from e

    def read_all(self) -> Iterator[SExpression]:
        while (form := self.read()) is not None:
            yield form

    # --- grammar ---
    def read_next(self) -> SExpression | None:
        self.skip_whitespace()
        self.skip_comments()

        if self.at_eof():
            return None

        c = self.peek()
        if NUMBER_RE.match(c):
            return self.read_number()

        match c:
            case "(":
                self.advance()
                lst = self.read_list(")")
                self.consume(")")
                return lst
            case "[":
                self.advance()
                lst = self.read_list("]")
                self.consume("]")
                return Pair(self.symbols.intern("list"), lst)
            case "'":
                self.advance()
                return self.read_prefixed("quote")
            case ",":
                self.advance()
                return self.read_prefixed("unquote")
            case '"':
                self.advance()
                return self.read_string()
            case "#":
                # Line comments were skipped above, so this is a #- elision
                self.elide()
                return self.read_next()
            case _:
                return self.read_symbol()

    def elide(self) -> None:
        self.consume("#")
        self.consume("-")
        discarded = self.read_next()
        # Eliding end of input leaves end of input
        if discarded is not None:
            logger.debug("elided %r", discarded)

    def read_number(self) -> int:
        m = NUMBER_RE.match(self.source, self.pos)
        self.pos = m.end()
        return int(m.group(), 10)

    def read_symbol(self) -> Symbol:
        m = SYMBOL_RE.match(self.source, self.pos)
        if not m.group():
            raise self.error(f"could not read symbol at {self.peek()!r}", actual=self.peek())
        self.pos = m.end()
        return self.symbols.intern(m.group())

    def read_string(self) -> str:
        start = self.pos
        while not self.at_eof() and self.peek() != '"':
            self.advance()
        text = self.source[start:self.pos]
        self.consume('"')
        return text

    def read_prefixed(self, name: str) -> Pair:
        """'x => (quote x), ,x => (unquote x)"""
        obj = self.read_next()
        if obj is None:
            raise self.error(f"expected a form after {name}")
        return make_list([self.symbols.intern(name), obj])

    def read_list(self, close: str) -> SExpression:
        """Read elements up to (not including) `close`; supports a dotted tail."""
        head: Pair | None = None
        tail: Pair | None = None
        while True:
            self.skip_atmosphere()
            if self.at_eof():
                raise self.error("unexpected end of list", expected=close)
            if self.peek() == close:
                return Nil if head is None else head

            if self.peek() == "." and tail is not None:
                self.consume(".")
                item = self.read_next()
                if item is None:
                    raise self.error("unexpected end of list", expected=close)
                tail.cdr = item
                self.skip_atmosphere()
                return head

            item = self.read_next()
            if item is None:
                raise self.error("unexpected end of list", expected=close)
            cell = Pair(item, Nil)
            if tail is None:
                head = tail = cell
            else:
                tail.cdr = cell
                tail = cell

    # --- skipping ---
    def skip_whitespace(self) -> None:
        while self.peek() and self.peek() in WHITESPACE:
            self.advance()

    def skip_comments(self) -> None:
        while self.peek() == "#" and self.peek(1) != "-":
            while not self.at_eof() and self.peek() != "\n":
                self.advance()
            self.skip_whitespace()

    def skip_atmosphere(self) -> None:
        """Whitespace, comments and #- elisions between list elements."""
        while True:
            self.skip_whitespace()
            self.skip_comments()
            if self.peek() == "#" and self.peek(1) == "-":
                self.elide()
                continue
            return


def read_all(source: str, symbols: SymbolTable) -> Iterator[SExpression]:
    """Read every top-level form in `source`."""
    return Reader(source, symbols).read_all()
