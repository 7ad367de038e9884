from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterator

from elysp import SExpression, LispValue
from elysp.builtin import make_root_env
from elysp.builtin.env_builtin import reader_debug_enabled
from elysp.debug_utils.pprint import colorize
from elysp.errors import ElyspError, ElyspStackOverflow
from elysp.evaluation.evaluator import evaluate
from elysp.modules.package_loader import default_environment
from elysp.reader.parser import Reader
from elysp.types.nil import Nil
from elysp.types.symbol import Symbol, SymbolTable

logger = logging.getLogger(__name__)

# Failures reported at the read-eval boundary; file errors come from slurp/import
REPORTED_ERRORS = (ElyspError, OSError)


class Interpreter:
    """
    Reads and evaluates elysp code against one default environment.
    Definitions persist across calls.
    """

    def __init__(self, prelude: bool | str = True, symbols: SymbolTable | None = None):
        self.symbols: SymbolTable = symbols if symbols is not None else SymbolTable()
        if prelude is True:
            self.env = default_environment(self.symbols)
        else:
            self.env = make_root_env(self.symbols)
            if prelude:
                self.eval_prelude(prelude)

    def intern(self, name: str) -> Symbol:
        return self.symbols.intern(name)

    def read(self, code: str) -> Iterator[SExpression]:
        return Reader(code, self.symbols).read_all()

    def eval_prelude(self, code: str) -> None:
        for form in self.read(code):
            evaluate(self.env, form)

    def eval_form(self, form: SExpression) -> LispValue:
        """Evaluate one top-level form, echoing it first when reader debugging is on."""
        if reader_debug_enabled(self.env):
            print(f"reader: {colorize(form)}")
        try:
            return evaluate(self.env, form)
        except RecursionError as e:
            raise ElyspStackOverflow("stack overflow: maximum recursion depth exceeded") from e

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code`; returns the last value (Nil if there is none)."""
        result: LispValue = Nil
        for form in self.read(code):
            result = self.eval_form(form)
        return result

    def run_file(self, path: str | Path) -> bool:
        """File mode: evaluate forms until end of input or the first error.

        Returns False if an error stopped the file.
        """
        source = Path(path).read_text(encoding="utf-8")
        reader = Reader(source, self.symbols)
        try:
            while (form := reader.read()) is not None:
                logger.debug("read %r", form)
                self.eval_form(form)
        except REPORTED_ERRORS as e:
            logger.debug("error in %s", path, exc_info=True)
            print(f"error: {e}", file=sys.stderr)
            return False
        return True
