"""Interactive mode: one form per line, results printed in color."""

from __future__ import annotations

import logging
import sys
from typing import Callable

from elysp.debug_utils.pprint import colorize
from elysp.interpreter import Interpreter, REPORTED_ERRORS
from elysp.reader.parser import Reader

logger = logging.getLogger(__name__)

PROMPT = "ely> "


def repl(interp: Interpreter, input_fn: Callable[[str], str] = input, prompt: str = PROMPT) -> None:
    """Prompt, read one form, evaluate, print. A blank line or end of input stops the loop."""
    while True:
        try:
            line = input_fn(prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            break
        try:
            form = Reader(line, interp.symbols).read()
            if form is None:
                break
            print(colorize(interp.eval_form(form)))
        except REPORTED_ERRORS as e:
            logger.debug("error evaluating %r", line, exc_info=True)
            print(f"error: {e}", file=sys.stderr)
