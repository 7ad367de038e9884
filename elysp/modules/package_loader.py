"""Startup and module loading.

default_environment() runs the startup sequence: a root environment with the
primitive library, then the bundled prelude (std/core.lisp, then
std/test.lisp). load_module() evaluates a source file for `import`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from elysp.builtin import make_root_env
from elysp.config import get_module_roots, get_prelude_root
from elysp.evaluation.evaluator import evaluate
from elysp.reader.parser import Reader
from elysp.types.environment import Environment
from elysp.types.nil import Nil
from elysp.types.symbol import SymbolTable

logger = logging.getLogger(__name__)

PRELUDE_FILES = ("std/core.lisp", "std/test.lisp")


def eval_source(code: str, env: Environment) -> None:
    """Read and evaluate every form of `code` in `env`."""
    for form in Reader(code, env.symbols).read_all():
        evaluate(env, form)


def load_prelude(env: Environment) -> None:
    root = get_prelude_root()
    for name in PRELUDE_FILES:
        p = root / name
        if not p.exists():
            logger.debug("prelude file %s not found, skipping", p)
            continue
        logger.debug("loading prelude %s", p)
        eval_source(p.read_text(encoding='utf-8'), env)


def default_environment(symbols: SymbolTable | None = None, prelude: bool = True) -> Environment:
    env = make_root_env(symbols)
    if prelude:
        load_prelude(env)
    return env


def resolve_module(path: str) -> Optional[Path]:
    """Find `path` relative to the current directory, then under ELYSP_PATH roots."""
    candidate = Path(path)
    if candidate.is_file():
        return candidate
    if candidate.is_absolute():
        return None
    for root in get_module_roots():
        candidate = root / path
        if candidate.is_file():
            return candidate
    return None


def load_module(path: str, symbols: SymbolTable) -> Environment:
    """Evaluate the file at `path` in a child of a fresh default environment.

    Returns the child frame, whose bindings are the module's top-level definitions.
    """
    p = resolve_module(path)
    if p is None:
        raise FileNotFoundError(f"Cannot find module '{path}' in the current directory or ELYSP_PATH")
    logger.debug("importing %s", p)
    module_env = Environment(Nil, default_environment(symbols))
    eval_source(p.read_text(encoding='utf-8'), module_env)
    return module_env
